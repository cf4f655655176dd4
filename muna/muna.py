#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from .beta import BetaClient
from .client import MunaClient
from .services import EdgeRuntime, PredictionService, PredictorService, UserService

class Muna:
    """
    Muna client.

    Members:
        client (MunaClient): Muna API client. Do NOT use this unless you know what you are doing.
        users (UserService): Manage users.
        predictors (PredictorService): Manage predictors.
        predictions (PredictionService): Make edge predictions.
        beta (BetaClient): Beta client for incubating features.
    """
    client: MunaClient
    users: UserService
    predictors: PredictorService
    predictions: PredictionService
    beta: BetaClient

    def __init__(
        self,
        access_key: str | None=None,
        *,
        api_url: str | None=None,
        runtime: EdgeRuntime | None=None
    ):
        """
        Create a Muna client.

        Parameters:
            access_key (str): Muna access key. Defaults to the `MUNA_ACCESS_KEY` environment variable.
            api_url (str): Muna API URL. Defaults to the `MUNA_API_URL` environment variable.
            runtime (EdgeRuntime): Runtime used to load predictors for edge predictions.
        """
        self.client = MunaClient(access_key=access_key, api_url=api_url)
        self.users = UserService(self.client)
        self.predictors = PredictorService(self.client)
        self.predictions = PredictionService(self.client, runtime=runtime)
        self.beta = BetaClient(
            self.client,
            predictors=self.predictors,
            predictions=self.predictions
        )
