#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from io import BytesIO
from json import JSONDecodeError, loads
from numpy import ndarray
from PIL import Image
from rich import print as print_rich
from typer import Argument, BadParameter, Exit, Option
from typing import Annotated

from ..logging import CustomProgress, CustomProgressTask
from ..muna import Muna
from ..types import Prediction, Value
from .auth import get_access_key

def create_prediction(
    tag: Annotated[str, Argument(help="Predictor tag.")],
    inputs: Annotated[list[str] | None, Option(
        "--input",
        "-i",
        help="Prediction input as `name=value`. Values are parsed as JSON when possible."
    )]=None,
    acceleration: Annotated[str, Option(
        help="Prediction acceleration. Accelerations starting with `remote_` run remotely."
    )]="remote_auto",
    stream: Annotated[bool, Option(
        "--stream",
        help="Whether to stream the prediction."
    )]=False
):
    muna = Muna(get_access_key())
    input_map = parse_inputs(inputs or [])
    if stream:
        predictions = muna.beta.predictions.stream(tag, inputs=input_map, acceleration=acceleration)
        for prediction in predictions:
            _print_prediction(prediction)
        return
    with CustomProgress(transient=True):
        with CustomProgressTask(loading_text=f"Running [bold cyan]{tag}[/bold cyan]...") as task:
            prediction = muna.beta.predictions.create(tag, inputs=input_map, acceleration=acceleration)
            if prediction.latency is not None:
                task.finish(f"Ran [bold cyan]{tag}[/bold cyan] in {prediction.latency:.2f}ms")
    _print_prediction(prediction)

def parse_inputs(inputs: list[str]) -> dict[str, Value]:
    """
    Parse `name=value` command line inputs into a prediction input map.
    """
    input_map = dict[str, Value]()
    for item in inputs:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise BadParameter(f"Input must have the form `name=value`: {item}")
        input_map[name] = _parse_value(value)
    return input_map

def _parse_value(value: str) -> Value:
    try:
        return loads(value)
    except JSONDecodeError:
        return value

def _print_prediction(prediction: Prediction):
    if prediction.error is not None:
        print_rich(f"[bright_red]{prediction.error}[/bright_red]")
        raise Exit(code=1)
    for result in prediction.results or []:
        print_rich(_describe_value(result))

def _describe_value(value: Value) -> str:
    match value:
        case ndarray():
            return f"tensor {value.dtype}{list(value.shape)}: {value}"
        case Image.Image():
            return f"image {value.mode} {value.width}x{value.height}"
        case BytesIO():
            return f"binary ({len(value.getbuffer())} bytes)"
        case _:
            return repr(value)
