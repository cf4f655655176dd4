#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from ..client import MunaClient
from ..services import PredictorService, PredictionService as EdgePredictionService
from .openai import OpenAIClient
from .predictions import PredictionService
from .remote import RemotePredictionService

class BetaClient:
    """
    Client for incubating features.

    Members:
        predictions (PredictionService): Make predictions on the edge or remotely.
        openai (OpenAIClient): OpenAI-compatible client.
    """
    predictions: PredictionService
    openai: OpenAIClient

    def __init__(
        self,
        client: MunaClient,
        *,
        predictors: PredictorService,
        predictions: EdgePredictionService
    ):
        remote_predictions = RemotePredictionService(client)
        self.predictions = PredictionService(predictions, remote_predictions)
        self.openai = OpenAIClient(predictors, self.predictions)
