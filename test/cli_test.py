#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from conftest import create_prediction
from muna import Dtype, Parameter, Predictor, Signature
from muna.beta.predictions import PredictionService
from muna.cli import app
from muna.cli.predictions import parse_inputs
from muna.services import PredictorService
from typer import BadParameter
from typer.testing import CliRunner
import pytest

runner = CliRunner()

def test_parse_inputs():
    inputs = parse_inputs(["radius=4", "name=Yusuf", "tags=[\"a\", \"b\"]", "enabled=true", "sentence=a=b"])
    assert inputs == {
        "radius": 4,
        "name": "Yusuf",
        "tags": ["a", "b"],
        "enabled": True,
        "sentence": "a=b"
    }

def test_parse_invalid_input():
    with pytest.raises(BadParameter):
        parse_inputs(["radius"])

def test_retrieve_predictor(monkeypatch):
    predictor = Predictor(
        tag="@yusuf/area",
        description="Compute the area of a circle.",
        signature=Signature(
            inputs=[Parameter(name="radius", type=Dtype.float32)],
            outputs=[Parameter(name="area", type=Dtype.float32)]
        )
    )
    monkeypatch.setattr(PredictorService, "retrieve", lambda self, tag: predictor)
    result = runner.invoke(app, ["predictors", "retrieve", "@yusuf/area"])
    assert result.exit_code == 0
    assert "@yusuf/area" in result.output
    assert "radius" in result.output

def test_retrieve_missing_predictor(monkeypatch):
    monkeypatch.setattr(PredictorService, "retrieve", lambda self, tag: None)
    result = runner.invoke(app, ["predictors", "retrieve", "@yusuf/missing"])
    assert result.exit_code == 1
    assert "not found" in result.output

def test_create_prediction(monkeypatch):
    def create(self, tag, *, inputs, acceleration):
        assert acceleration == "remote_auto"
        prediction = create_prediction(tag, [inputs["radius"] * 2])
        return prediction.model_copy(update={ "latency": 12.5 })
    monkeypatch.setattr(PredictionService, "create", create)
    result = runner.invoke(app, ["predict", "@yusuf/area", "--input", "radius=4"])
    assert result.exit_code == 0
    assert "8" in result.output

def test_create_prediction_with_error(monkeypatch):
    monkeypatch.setattr(
        PredictionService,
        "create",
        lambda self, tag, *, inputs, acceleration: create_prediction(tag, None, error="Radius must be positive")
    )
    result = runner.invoke(app, ["predict", "@yusuf/area", "-i", "radius=-1"])
    assert result.exit_code == 1
    assert "Radius must be positive" in result.output

def test_create_prediction_with_empty_error(monkeypatch):
    monkeypatch.setattr(
        PredictionService,
        "create",
        lambda self, tag, *, inputs, acceleration: create_prediction(tag, None, error="")
    )
    result = runner.invoke(app, ["predict", "@yusuf/area", "-i", "radius=4"])
    assert result.exit_code == 1

def test_stream_prediction(monkeypatch):
    def stream(self, tag, *, inputs, acceleration):
        yield create_prediction(tag, ["Hello"])
        yield create_prediction(tag, ["Hello world"])
    monkeypatch.setattr(PredictionService, "stream", stream)
    result = runner.invoke(app, ["predict", "@yusuf/llm", "-i", "prompt=hi", "--stream"])
    assert result.exit_code == 0
    assert "'Hello'" in result.output
    assert "'Hello world'" in result.output
