#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from pydantic import TypeAdapter
from pytest import fixture

from muna.beta.predictions import PredictionService
from muna.types import Prediction, Predictor, Signature

class FakeClient:
    """
    In-process stand-in for `MunaClient`.
    """

    def __init__(self, response=None, events=(), *, error: Exception | None=None):
        self.response = response
        self.error = error
        self.events = list(events)
        self.requests = []
        self.stream_closed = False

    def request(self, *, method, path, body=None, response_type=None):
        self.requests.append((method, path, body))
        if self.error is not None:
            raise self.error
        if response_type is None:
            return self.response
        return TypeAdapter(response_type).validate_python(self.response)

    def stream(self, *, method, path, body=None, response_type=dict):
        self.requests.append((method, path, body))
        adapter = TypeAdapter(response_type)
        try:
            for event in self.events:
                yield adapter.validate_python(event)
        finally:
            self.stream_closed = True

class FakePredictorService:

    def __init__(self, *predictors: Predictor):
        self.predictors = { predictor.tag: predictor for predictor in predictors }
        self.retrieved = []

    def add(self, predictor: Predictor):
        self.predictors[predictor.tag] = predictor

    def retrieve(self, tag: str) -> Predictor | None:
        self.retrieved.append(tag)
        return self.predictors.get(tag)

class FakePredictionPath:
    """
    Prediction path which returns canned results.
    `stream_results` holds the results of each streamed prediction.
    """

    def __init__(
        self,
        results=None,
        *,
        stream_results=None,
        error=None,
        supports_streaming=True
    ):
        self.results = results
        self.stream_results = stream_results if stream_results is not None else [results]
        self.error = error
        self.supports_streaming = supports_streaming
        self.requests = []
        self.stream_closed = False

    def create(self, tag, *, inputs, acceleration):
        self.requests.append(("create", tag, inputs, acceleration))
        return create_prediction(tag, self.results, error=self.error)

    def stream(self, tag, *, inputs, acceleration):
        self.requests.append(("stream", tag, inputs, acceleration))
        return self.__stream(tag)

    def __stream(self, tag):
        try:
            for results in self.stream_results:
                yield create_prediction(tag, results, error=self.error)
        finally:
            self.stream_closed = True

def create_prediction(tag: str, results, *, error: str | None=None) -> Prediction:
    return Prediction(
        id="pred_test",
        tag=tag,
        results=results,
        error=error,
        created="2026-01-01T00:00:00Z"
    )

def create_predictor(tag: str, *, inputs, outputs) -> Predictor:
    return Predictor(tag=tag, signature=Signature(inputs=inputs, outputs=outputs))

def create_router(
    edge: FakePredictionPath | None=None,
    remote: FakePredictionPath | None=None
) -> PredictionService:
    return PredictionService(edge or FakePredictionPath(), remote or FakePredictionPath())

@fixture
def edge_path() -> FakePredictionPath:
    return FakePredictionPath(supports_streaming=False)

@fixture
def remote_path() -> FakePredictionPath:
    return FakePredictionPath()
