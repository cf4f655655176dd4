#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

__version__ = "0.1.0"
