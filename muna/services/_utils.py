#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from pathlib import Path
import platform
from tempfile import gettempdir

def get_client_id() -> str:
    """
    Get the client identifier for the current platform.
    """
    match (platform.system().lower(), platform.machine().lower()):
        case ("darwin", "arm64"):           return "arm64-apple-darwin"
        case ("darwin", "x86_64"):          return "x86_64-apple-darwin"
        case ("linux", "aarch64"):          return "aarch64-unknown-linux-gnu"
        case ("linux", "x86_64"):           return "x86_64-unknown-linux-gnu"
        case ("windows", "arm64"):          return "aarch64-pc-windows-msvc"
        case ("windows", "amd64"):          return "x86_64-pc-windows-msvc"
        case _:                             return "python"

def get_home_dir() -> Path:
    """
    Get a writable home directory, falling back to the temporary directory.
    """
    try:
        check = Path.home() / ".fxntest"
        with open(check, "w") as f:
            f.write("fxn")
        check.unlink()
        return Path.home()
    except OSError:
        return Path(gettempdir())
