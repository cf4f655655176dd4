#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from .prediction import EdgeConfiguration, EdgePredictor, EdgeRuntime, PredictionService
from .predictor import PredictorService
from .user import UserService
