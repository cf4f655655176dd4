#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from muna import EdgeConfiguration, Prediction, StreamingNotSupported
from muna.beta.predictions import is_remote_acceleration
from muna.services import PredictionService
import pytest

from conftest import FakeClient, FakePredictionPath, create_prediction, create_router

class _FakeEdgePredictor:

    def __init__(self, configuration: EdgeConfiguration):
        self.configuration = configuration

    def create_prediction(self, inputs):
        return create_prediction(self.configuration.tag, [inputs["radius"] ** 2 * 3.14])

    def stream_prediction(self, inputs):
        for word in inputs["sentence"].split():
            yield create_prediction(self.configuration.tag, [word])

class _FakeEdgeRuntime:

    def __init__(self):
        self.configurations = []

    def load(self, configuration: EdgeConfiguration):
        self.configurations.append(configuration)
        return _FakeEdgePredictor(configuration)

_RAW_PREDICTION = {
    "id": "pred_raw",
    "tag": "@yusuf/area",
    "created": "2026-01-01T00:00:00Z",
    "configuration": "cfg_token",
    "resources": []
}

def test_create_raw_prediction():
    client = FakeClient(response=_RAW_PREDICTION)
    predictions = PredictionService(client)
    prediction = predictions.create("@yusuf/area", client_id="x86_64-unknown-linux-gnu", configuration_id="cfg_1")
    assert isinstance(prediction, Prediction)
    assert prediction.configuration == "cfg_token"
    method, path, body = client.requests[0]
    assert (method, path) == ("POST", "/predictions")
    assert body == { "tag": "@yusuf/area", "clientId": "x86_64-unknown-linux-gnu", "configurationId": "cfg_1" }

def test_create_edge_prediction():
    runtime = _FakeEdgeRuntime()
    predictions = PredictionService(FakeClient(response=_RAW_PREDICTION), runtime=runtime)
    prediction = predictions.create("@yusuf/area", inputs={ "radius": 2 }, acceleration="gpu")
    assert prediction.results == [pytest.approx(12.56)]
    configuration = runtime.configurations[0]
    assert configuration.token == "cfg_token"
    assert configuration.acceleration == "gpu"
    assert configuration.resources == []

def test_edge_predictor_is_loaded_once():
    runtime = _FakeEdgeRuntime()
    predictions = PredictionService(FakeClient(response=_RAW_PREDICTION), runtime=runtime)
    predictions.create("@yusuf/area", inputs={ "radius": 1 })
    predictions.create("@yusuf/area", inputs={ "radius": 3 })
    assert len(runtime.configurations) == 1
    assert predictions.delete("@yusuf/area")
    assert not predictions.delete("@yusuf/area")
    predictions.create("@yusuf/area", inputs={ "radius": 3 })
    assert len(runtime.configurations) == 2

def test_stream_edge_prediction():
    predictions = PredictionService(FakeClient(response=_RAW_PREDICTION), runtime=_FakeEdgeRuntime())
    stream = predictions.stream("@yusuf/area", inputs={ "sentence": "The fat cat sat on the mat." })
    words = [prediction.results[0] for prediction in stream]
    assert words == ["The", "fat", "cat", "sat", "on", "the", "mat."]

def test_create_edge_prediction_without_runtime():
    predictions = PredictionService(FakeClient(response=_RAW_PREDICTION))
    with pytest.raises(RuntimeError):
        predictions.create("@yusuf/area", inputs={ "radius": 2 })

def test_route_remote_prediction():
    edge, remote = FakePredictionPath(["edge"]), FakePredictionPath(["remote"])
    router = create_router(edge, remote)
    prediction = router.create("@fxn/greeting", inputs={ "name": "Yusuf" }, acceleration="remote_auto")
    assert prediction.results == ["remote"]
    assert not edge.requests
    assert remote.requests[0][3] == "remote_auto"

def test_route_edge_prediction():
    edge, remote = FakePredictionPath(["edge"]), FakePredictionPath(["remote"])
    router = create_router(edge, remote)
    for acceleration in ("auto", "cpu", "gpu", "npu", "local_auto"):
        prediction = router.create("@fxn/greeting", inputs={}, acceleration=acceleration)
        assert prediction.results == ["edge"]
    assert not remote.requests

def test_stream_routed_prediction():
    remote = FakePredictionPath(stream_results=[["a"], ["a", "b"]])
    router = create_router(remote=remote)
    stream = router.stream("@fxn/generator", inputs={}, acceleration="remote_cpu")
    assert [prediction.results for prediction in stream] == [["a"], ["a", "b"]]
    assert remote.stream_closed

def test_stream_prediction_without_streaming_support(edge_path: FakePredictionPath):
    router = create_router(edge=edge_path)
    assert not router.supports_streaming("auto")
    assert router.supports_streaming("remote_auto")
    with pytest.raises(StreamingNotSupported) as ex:
        router.stream("@fxn/generator", inputs={}, acceleration="auto")
    assert ex.value.acceleration == "auto"
    assert not edge_path.requests

def test_remote_acceleration_prefix():
    assert is_remote_acceleration("remote_a100")
    assert not is_remote_acceleration("auto")
    assert not is_remote_acceleration("remote")
