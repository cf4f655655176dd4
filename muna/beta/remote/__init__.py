#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from .remote import RemotePredictionService
from .schema import RemoteAcceleration, RemotePrediction
from .value import create_remote_value, parse_remote_value
