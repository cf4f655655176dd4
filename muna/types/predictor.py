#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from pydantic import BaseModel, Field
from typing import Literal

from .parameter import Parameter
from .user import User

PredictorAccess = Literal["public", "private", "unlisted"]

PredictorStatus = Literal["compiling", "active", "archived"]

class Signature(BaseModel):
    """
    Predictor signature.

    Members:
        inputs (list): Input parameters.
        outputs (list): Output parameters.
    """
    inputs: list[Parameter] = Field(description="Input parameters.")
    outputs: list[Parameter] = Field(description="Output parameters.")

class Predictor(BaseModel):
    """
    Predictor.

    Members:
        tag (str): Predictor tag.
        owner (User): Predictor owner.
        name (str): Predictor name.
        description (str): Predictor description.
        status (PredictorStatus): Predictor status.
        access (PredictorAccess): Predictor access.
        signature (Signature): Predictor signature.
        created (str): Date created.
        card (str): Predictor card.
        media (str): Predictor media URL.
        license (str): Predictor license URL.
    """
    tag: str = Field(description="Predictor tag.")
    owner: User | None = Field(default=None, description="Predictor owner.")
    name: str | None = Field(default=None, description="Predictor name.")
    description: str | None = Field(default=None, description="Predictor description.")
    status: PredictorStatus | None = Field(default=None, description="Predictor status.")
    access: PredictorAccess | None = Field(default=None, description="Predictor access.")
    signature: Signature = Field(description="Predictor signature.")
    created: str | None = Field(default=None, description="Date created.")
    card: str | None = Field(default=None, description="Predictor card.")
    media: str | None = Field(default=None, description="Predictor media URL.")
    license: str | None = Field(default=None, description="Predictor license URL.")
