#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from rich import print as print_rich
from rich.table import Table
from typer import Argument, Exit, Typer
from typing import Annotated

from ..muna import Muna
from ..types import Parameter
from .auth import get_access_key

app = Typer(no_args_is_help=True, help="Manage predictors.")

@app.command(name="retrieve", help="Retrieve a predictor.")
def retrieve_predictor(
    tag: Annotated[str, Argument(help="Predictor tag.")]
):
    muna = Muna(get_access_key())
    predictor = muna.predictors.retrieve(tag)
    if predictor is None:
        print_rich(f"[bright_red]Predictor not found:[/bright_red] {tag}")
        raise Exit(code=1)
    print_rich(f"[bold cyan]{predictor.tag}[/bold cyan]")
    if predictor.description:
        print_rich(predictor.description)
    print_rich(_create_parameter_table("Inputs", predictor.signature.inputs))
    print_rich(_create_parameter_table("Outputs", predictor.signature.outputs))

def _create_parameter_table(title: str, parameters: list[Parameter]) -> Table:
    table = Table(title=title, title_justify="left")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Denotation")
    table.add_column("Optional")
    table.add_column("Description")
    for param in parameters:
        table.add_row(
            param.name,
            str(param.type) if param.type is not None else "",
            param.denotation or "",
            "yes" if param.optional else "",
            param.description or ""
        )
    return table
