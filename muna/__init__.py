#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from .client import MunaAPIError
from .errors import (
    IncompatiblePredictor, InvalidPredictorOutput, MalformedValueBuffer, MunaError,
    PredictionFailed, StreamingNotSupported, UnsupportedDtype, UnsupportedValueType
)
from .muna import Muna
from .services import EdgeConfiguration, EdgePredictor, EdgeRuntime
from .types import *
from .version import __version__
