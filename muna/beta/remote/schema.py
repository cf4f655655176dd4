#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from pydantic import BaseModel, Field
from typing import Literal

from ...types import Prediction, RemoteValue

RemoteAcceleration = Literal[
    "remote_auto",
    "remote_cpu",
    "remote_a10",
    "remote_a40",
    "remote_a100",
    "remote_h200",
    "remote_b200"
]

class RemotePrediction(Prediction):
    """
    Remote prediction, with results that have not been downloaded.
    """
    results: list[RemoteValue] | None = Field(default=None, description="Prediction results.")

class RemotePredictionEvent(BaseModel):
    """
    Remote prediction stream event.
    """
    event: Literal["prediction"] = Field(description="Event type.")
    data: RemotePrediction = Field(description="Partial prediction.")
