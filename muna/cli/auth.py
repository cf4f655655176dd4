#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from os import environ

_access_key: str | None = None

def set_access_key(access_key: str | None):
    """
    Set the access key used by CLI commands.
    """
    global _access_key
    _access_key = access_key

def get_access_key() -> str | None:
    """
    Get the access key used by CLI commands.
    The `--access-key` option takes precedence over the `MUNA_ACCESS_KEY` environment variable.
    """
    return _access_key if _access_key is not None else environ.get("MUNA_ACCESS_KEY")
