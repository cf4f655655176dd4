#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from pathlib import Path
from requests import get
from rich.progress import (
    Progress, BarColumn, DownloadColumn, TextColumn,
    TimeRemainingColumn, TransferSpeedColumn
)
from tempfile import NamedTemporaryFile
from typing import TYPE_CHECKING
from urllib.parse import urlparse

if TYPE_CHECKING:
    from .client import MunaClient

def download_resource(
    url: str,
    path: Path,
    *,
    client: MunaClient | None=None,
    progress: str | bool=True
) -> Path:
    """
    Download a resource to a given path.

    Parameters:
        url (str): Resource URL.
        path (Path): Destination path.
        client (MunaClient): Client used to authorize the download.
        progress (str | bool): Whether to show a progress bar. Pass a color name to style the bar.

    Returns:
        Path: Destination path.
    """
    headers = (
        { "Authorization": f"Bearer {client.access_key}" }
        if client and client.access_key
        else None
    )
    with get(url, headers=headers, stream=True, allow_redirects=True) as response:
        response.raise_for_status()
        size = int(response.headers.get("content-length", 0))
        name = Path(urlparse(url).path).name
        color = progress if isinstance(progress, str) else "dark_orange"
        path.parent.mkdir(parents=True, exist_ok=True)
        with (
            Progress(
                TextColumn(f"[{color}]{{task.description}}"),
                BarColumn(),
                DownloadColumn(),
                TransferSpeedColumn(),
                TimeRemainingColumn(),
                disable=not progress
            ) as progress_bar,
            NamedTemporaryFile(mode="wb", dir=path.parent, delete=False) as tmp_file
        ):
            task_id = progress_bar.add_task(name, total=size)
            for chunk in response.iter_content(chunk_size=8192):
                if chunk:
                    tmp_file.write(chunk)
                    progress_bar.advance(task_id, len(chunk))
    Path(tmp_file.name).replace(path)
    return path
