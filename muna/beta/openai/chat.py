#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from ...services import PredictorService
from ..predictions import PredictionService
from .completions import ChatCompletionService

class ChatService:
    """
    Chat service.

    Members:
        completions (ChatCompletionService): Chat completions service.
    """
    completions: ChatCompletionService

    def __init__(
        self,
        predictors: PredictorService,
        predictions: PredictionService
    ):
        self.completions = ChatCompletionService(predictors, predictions)
