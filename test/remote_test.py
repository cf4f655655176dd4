#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from muna import Dtype
from muna.beta.remote import RemotePredictionService, create_remote_value
from typing import Iterator

from conftest import FakeClient

def _create_remote_prediction(*results, error=None) -> dict:
    return {
        "id": "pred_remote",
        "tag": "@muna/greeting",
        "created": "2026-01-01T00:00:00Z",
        "results": [create_remote_value(result).model_dump(mode="json") for result in results],
        "latency": 12.5,
        "error": error
    }

def test_create_remote_prediction():
    client = FakeClient(response=_create_remote_prediction("Hello Yusuf! You are 67 years old."))
    predictions = RemotePredictionService(client)
    prediction = predictions.create(
        "@muna/greeting",
        inputs={ "name": "Yusuf", "age": 67 },
        acceleration="remote_a100"
    )
    assert prediction.results == ["Hello Yusuf! You are 67 years old."]
    assert prediction.latency == 12.5
    method, path, body = client.requests[0]
    assert method == "POST"
    assert path == "/predictions/remote"
    assert body["tag"] == "@muna/greeting"
    assert body["acceleration"] == "remote_a100"
    assert body["inputs"]["name"]["type"] == Dtype.string
    assert body["inputs"]["age"]["type"] == Dtype.int32
    assert "stream" not in body

def test_create_remote_prediction_with_error():
    client = FakeClient(response={ **_create_remote_prediction(), "results": None, "error": "Out of memory" })
    predictions = RemotePredictionService(client)
    prediction = predictions.create("@muna/greeting", inputs={})
    assert prediction.results is None
    assert prediction.error == "Out of memory"

def test_stream_remote_prediction():
    client = FakeClient(events=[
        { "event": "prediction", "data": _create_remote_prediction("Hello") },
        { "event": "prediction", "data": _create_remote_prediction("Hello Yusuf") },
    ])
    predictions = RemotePredictionService(client)
    stream = predictions.stream("@muna/greeting", inputs={ "name": "Yusuf" })
    assert isinstance(stream, Iterator)
    assert not client.requests
    results = [prediction.results[0] for prediction in stream]
    assert results == ["Hello", "Hello Yusuf"]
    _, _, body = client.requests[0]
    assert body["stream"] is True
    assert client.stream_closed

def test_close_remote_prediction_stream():
    client = FakeClient(events=[
        { "event": "prediction", "data": _create_remote_prediction("Hello") },
        { "event": "prediction", "data": _create_remote_prediction("Hello Yusuf") },
    ])
    predictions = RemotePredictionService(client)
    stream = predictions.stream("@muna/greeting", inputs={ "name": "Yusuf" })
    first = next(stream)
    assert first.results == ["Hello"]
    stream.close()
    assert client.stream_closed
