#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from typing import Iterator

from ..errors import StreamingNotSupported
from ..services import PredictionService as EdgePredictionService
from ..types import Acceleration, Prediction, Value
from .remote import RemoteAcceleration, RemotePredictionService

class PredictionService:
    """
    Make predictions, routing each one to the edge or to a remote server
    based on the requested acceleration.

    Accelerations starting with `remote_` run remotely. Every other
    acceleration runs on the edge, in the current process.

    Members:
        remote (RemotePredictionService): Make remote predictions.
    """
    remote: RemotePredictionService

    def __init__(
        self,
        predictions: EdgePredictionService,
        remote_predictions: RemotePredictionService
    ):
        self.remote = remote_predictions
        self.__predictions = predictions

    def create(
        self,
        tag: str,
        *,
        inputs: dict[str, Value],
        acceleration: Acceleration | RemoteAcceleration | str="remote_auto"
    ) -> Prediction:
        """
        Create a prediction.

        Parameters:
            tag (str): Predictor tag.
            inputs (dict): Input values.
            acceleration (Acceleration | RemoteAcceleration): Prediction acceleration.

        Returns:
            Prediction: Created prediction.
        """
        service = self.__get_service(acceleration)
        return service.create(tag, inputs=inputs, acceleration=acceleration)

    def stream(
        self,
        tag: str,
        *,
        inputs: dict[str, Value],
        acceleration: Acceleration | RemoteAcceleration | str="remote_auto"
    ) -> Iterator[Prediction]:
        """
        Stream a prediction.

        Parameters:
            tag (str): Predictor tag.
            inputs (dict): Input values.
            acceleration (Acceleration | RemoteAcceleration): Prediction acceleration.

        Returns:
            Iterator: Prediction stream.
        """
        if not self.supports_streaming(acceleration):
            raise StreamingNotSupported(acceleration)
        service = self.__get_service(acceleration)
        return service.stream(tag, inputs=inputs, acceleration=acceleration)

    def supports_streaming(self, acceleration: str) -> bool:
        """
        Whether predictions made with a given acceleration can be streamed.

        Parameters:
            acceleration (str): Prediction acceleration.
        """
        service = self.__get_service(acceleration)
        return getattr(service, "supports_streaming", False)

    def __get_service(self, acceleration: str) -> EdgePredictionService | RemotePredictionService:
        return self.remote if is_remote_acceleration(acceleration) else self.__predictions

def is_remote_acceleration(acceleration: str) -> bool:
    """
    Whether an acceleration selects remote predictions.

    Parameters:
        acceleration (str): Prediction acceleration.
    """
    return isinstance(acceleration, str) and acceleration.startswith("remote_")
