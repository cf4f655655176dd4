#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from .client import BetaClient
from .predictions import PredictionService
from .remote import RemoteAcceleration, RemotePredictionService
from .types import Audio
