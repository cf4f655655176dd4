#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from logging import getLogger
from typing import Iterator

from ...client import MunaClient
from ...services._utils import get_client_id
from ...types import Prediction, Value
from .schema import RemoteAcceleration, RemotePrediction, RemotePredictionEvent
from .value import create_remote_value, parse_remote_value

logger = getLogger(__name__)

class RemotePredictionService:
    """
    Make remote predictions.
    """
    supports_streaming = True

    def __init__(self, client: MunaClient):
        self.client = client

    def create(
        self,
        tag: str,
        *,
        inputs: dict[str, Value],
        acceleration: RemoteAcceleration="remote_auto"
    ) -> Prediction:
        """
        Create a remote prediction.

        Parameters:
            tag (str): Predictor tag.
            inputs (dict): Input values.
            acceleration (RemoteAcceleration): Prediction acceleration.

        Returns:
            Prediction: Created prediction.
        """
        logger.debug("Creating remote prediction for %s with %s acceleration", tag, acceleration)
        remote_prediction = self.client.request(
            method="POST",
            path="/predictions/remote",
            body={
                "tag": tag,
                "inputs": _create_input_map(inputs),
                "acceleration": acceleration,
                "clientId": get_client_id()
            },
            response_type=RemotePrediction
        )
        return _parse_remote_prediction(remote_prediction)

    def stream(
        self,
        tag: str,
        *,
        inputs: dict[str, Value],
        acceleration: RemoteAcceleration="remote_auto"
    ) -> Iterator[Prediction]:
        """
        Stream a remote prediction.

        Parameters:
            tag (str): Predictor tag.
            inputs (dict): Input values.
            acceleration (RemoteAcceleration): Prediction acceleration.

        Returns:
            Iterator: Prediction stream.
        """
        logger.debug("Streaming remote prediction for %s with %s acceleration", tag, acceleration)
        events = self.client.stream(
            method="POST",
            path="/predictions/remote",
            body={
                "tag": tag,
                "inputs": _create_input_map(inputs),
                "acceleration": acceleration,
                "clientId": get_client_id(),
                "stream": True
            },
            response_type=RemotePredictionEvent
        )
        try:
            for event in events:
                yield _parse_remote_prediction(event.data)
        finally:
            events.close()

def _create_input_map(inputs: dict[str, Value]) -> dict[str, object]:
    return {
        name: create_remote_value(value).model_dump(mode="json")
        for name, value in inputs.items()
    }

def _parse_remote_prediction(prediction: RemotePrediction) -> Prediction:
    """
    Download the results of a remote prediction.
    """
    results = (
        list(map(parse_remote_value, prediction.results))
        if prediction.results is not None
        else None
    )
    return Prediction(
        id=prediction.id,
        tag=prediction.tag,
        results=results,
        latency=prediction.latency,
        error=prediction.error,
        logs=prediction.logs,
        created=prediction.created
    )
