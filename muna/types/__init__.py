#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from .parameter import EnumerationMember, Parameter, ParameterDenotation
from .prediction import Acceleration, Prediction, PredictionResource
from .predictor import Predictor, PredictorAccess, PredictorStatus, Signature
from .user import User
from .value import Dtype, RemoteValue, Value
