#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from ...services import PredictorService
from ..predictions import PredictionService
from .speech import SpeechService

class AudioService:
    """
    Audio service.

    Members:
        speech (SpeechService): Speech service.
    """
    speech: SpeechService

    def __init__(
        self,
        predictors: PredictorService,
        predictions: PredictionService
    ):
        self.speech = SpeechService(predictors, predictions)
