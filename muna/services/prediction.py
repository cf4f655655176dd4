#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from dataclasses import dataclass, field
from logging import getLogger
from pathlib import Path
from typing import Iterator, Protocol
from urllib.parse import urlparse

from ..client import MunaClient
from ..resources import download_resource
from ..types import Acceleration, Prediction, PredictionResource, Value
from ._utils import get_client_id, get_home_dir

logger = getLogger(__name__)

@dataclass
class EdgeConfiguration:
    """
    Configuration used to load a predictor for edge predictions.

    Members:
        tag (str): Predictor tag.
        token (str): Prediction configuration token.
        acceleration (Acceleration): Prediction acceleration.
        device (object): Prediction device.
        resources (list): Downloaded predictor resources as `(type, path)` pairs.
    """
    tag: str
    token: str | None
    acceleration: Acceleration | str = "auto"
    device: object = None
    resources: list[tuple[str, Path]] = field(default_factory=list)

class EdgePredictor(Protocol):
    """
    Predictor loaded into the current process.
    """

    def create_prediction(self, inputs: dict[str, Value]) -> Prediction: ...

    def stream_prediction(self, inputs: dict[str, Value]) -> Iterator[Prediction]: ...

class EdgeRuntime(Protocol):
    """
    Runtime that loads predictors for in-process execution.
    """

    def load(self, configuration: EdgeConfiguration) -> EdgePredictor: ...

class PredictionService:
    """
    Make edge predictions.
    """
    supports_streaming = True

    def __init__(
        self,
        client: MunaClient,
        runtime: EdgeRuntime | None=None
    ):
        self.client = client
        self.runtime = runtime
        self.__cache = dict[str, EdgePredictor]()
        self.__cache_dir = get_home_dir() / ".fxn" / "cache"

    def create(
        self,
        tag: str,
        *,
        inputs: dict[str, Value] | None=None,
        acceleration: Acceleration="auto",
        device=None,
        client_id: str | None=None,
        configuration_id: str | None=None
    ) -> Prediction:
        """
        Create a prediction.

        Parameters:
            tag (str): Predictor tag.
            inputs (dict): Input values.
            acceleration (Acceleration): Prediction acceleration.
            client_id (str): Muna client identifier. Specify this to override the current client identifier.
            configuration_id (str): Configuration identifier. Specify this to override the current client configuration identifier.

        Returns:
            Prediction: Created prediction.
        """
        if inputs is None:
            return self.__create_raw_prediction(
                tag=tag,
                client_id=client_id,
                configuration_id=configuration_id
            )
        predictor = self.__get_predictor(
            tag=tag,
            acceleration=acceleration,
            device=device,
            client_id=client_id,
            configuration_id=configuration_id
        )
        return predictor.create_prediction(inputs)

    def stream(
        self,
        tag: str,
        *,
        inputs: dict[str, Value],
        acceleration: Acceleration="auto",
        device=None
    ) -> Iterator[Prediction]:
        """
        Stream a prediction.

        Parameters:
            tag (str): Predictor tag.
            inputs (dict): Input values.
            acceleration (Acceleration): Prediction acceleration.

        Returns:
            Iterator: Prediction stream.
        """
        predictor = self.__get_predictor(
            tag=tag,
            acceleration=acceleration,
            device=device
        )
        yield from predictor.stream_prediction(inputs)

    def delete(self, tag: str) -> bool:
        """
        Delete a predictor that is loaded in memory.

        Parameters:
            tag (str): Predictor tag.

        Returns:
            bool: Whether the predictor was successfully deleted from memory.
        """
        return self.__cache.pop(tag, None) is not None

    def __create_raw_prediction(
        self,
        tag: str,
        client_id: str | None=None,
        configuration_id: str | None=None
    ) -> Prediction:
        body = {
            "tag": tag,
            "clientId": client_id if client_id is not None else get_client_id()
        }
        if configuration_id is not None:
            body["configurationId"] = configuration_id
        prediction = self.client.request(
            method="POST",
            path="/predictions",
            body=body,
            response_type=Prediction
        )
        return prediction

    def __get_predictor(
        self,
        tag: str,
        acceleration: Acceleration="auto",
        device=None,
        client_id: str | None=None,
        configuration_id: str | None=None
    ) -> EdgePredictor:
        if tag in self.__cache:
            return self.__cache[tag]
        if self.runtime is None:
            raise RuntimeError(
                f"Failed to create edge prediction for {tag} because no edge "
                f"runtime is available. Use a `remote_` acceleration to run "
                f"the prediction remotely instead."
            )
        prediction = self.__create_raw_prediction(
            tag=tag,
            client_id=client_id,
            configuration_id=configuration_id
        )
        configuration = EdgeConfiguration(
            tag=prediction.tag,
            token=prediction.configuration,
            acceleration=acceleration,
            device=device
        )
        for resource in prediction.resources or []:
            path = self.__get_resource_path(resource)
            if not path.exists():
                color = "dark_orange" if not resource.type == "dso" else "purple"
                download_resource(resource.url, path, client=self.client, progress=color)
            configuration.resources.append((resource.type, path))
        logger.debug("Loading %s with %d resources", tag, len(configuration.resources))
        predictor = self.runtime.load(configuration)
        self.__cache[tag] = predictor
        return predictor

    def __get_resource_path(self, resource: PredictionResource) -> Path:
        stem = Path(urlparse(resource.url).path).name
        path = self.__cache_dir / stem
        path = path / resource.name if resource.name else path
        return path
