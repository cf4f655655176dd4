#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from typer import Option, Typer
from typing import Annotated

from ..version import __version__
from .auth import set_access_key
from .predictions import create_prediction
from .predictors import app as predictors_app

app = Typer(
    name=f"Muna CLI {__version__}",
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
    add_completion=False
)

@app.callback()
def main(
    access_key: Annotated[str | None, Option(
        envvar="MUNA_ACCESS_KEY",
        help="Muna access key."
    )]=None
):
    set_access_key(access_key)

app.command(name="predict", help="Make a prediction.")(create_prediction)
app.add_typer(predictors_app, name="predictors")
