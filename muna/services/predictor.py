#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from ..client import MunaAPIError, MunaClient
from ..types import Predictor

class PredictorService:

    def __init__(self, client: MunaClient):
        self.client = client

    def retrieve(self, tag: str) -> Predictor | None:
        """
        Retrieve a predictor.

        Parameters:
            tag (str): Predictor tag.

        Returns:
            Predictor: Predictor. This is `None` if the predictor does not exist or cannot be accessed.
        """
        try:
            return self.client.request(
                method="GET",
                path=f"/predictors/{tag}",
                response_type=Predictor
            )
        except MunaAPIError as error:
            if error.status_code == 404:
                return None
            raise
