#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from ...services import PredictorService
from ..predictions import PredictionService
from .audio import AudioService
from .chat import ChatService
from .embeddings import EmbeddingsService

class OpenAIClient:
    """
    Experimental client mimicking the official OpenAI client.

    Members:
        chat (ChatService): Chat service.
        embeddings (EmbeddingsService): Embeddings service.
        audio (AudioService): Audio service.
    """
    chat: ChatService
    embeddings: EmbeddingsService
    audio: AudioService

    def __init__(
        self,
        predictors: PredictorService,
        predictions: PredictionService
    ):
        self.chat = ChatService(predictors, predictions)
        self.embeddings = EmbeddingsService(predictors, predictions)
        self.audio = AudioService(predictors, predictions)
