#
#   Muna
#   Copyright © 2026 NatML Inc. All Rights Reserved.
#

from __future__ import annotations
from json import JSONDecodeError, loads
from logging import getLogger
from os import environ
from pathlib import Path
from pydantic import TypeAdapter
from requests import Response, request
from typing import Any, Iterator, TypeVar

T = TypeVar("T")

logger = getLogger(__name__)

class MunaClient:
    """
    Muna API client.

    Members:
        api_url (str): Muna API URL.
        access_key (str): Muna access key.
    """
    URL = "https://api.muna.ai/v1"

    def __init__(
        self,
        access_key: str | None=None,
        api_url: str | None=None
    ):
        self.access_key = access_key if access_key is not None else environ.get("MUNA_ACCESS_KEY")
        self.api_url = api_url or environ.get("MUNA_API_URL") or MunaClient.URL

    def request(
        self,
        *,
        method: str,
        path: str,
        body: dict[str, Any] | None=None,
        response_type: type[T] | None=None
    ) -> T:
        """
        Make a request to a REST endpoint.

        Parameters:
            method (str): Request method.
            path (str): Endpoint path.
            body (dict): Request JSON body.
            response_type (type): Response type.
        """
        logger.debug("%s %s", method, path)
        response = request(
            method=method,
            url=f"{self.api_url}{path}",
            json=body,
            headers=self.__get_headers()
        )
        data = _parse_response_payload(response)
        if not response.ok:
            raise MunaAPIError(_get_error_message(data), response.status_code)
        if response_type is None:
            return data
        return TypeAdapter(response_type).validate_python(data)

    def stream(
        self,
        *,
        method: str,
        path: str,
        body: dict[str, Any] | None=None,
        response_type: type[T]=dict
    ) -> Iterator[T]:
        """
        Make a request to a REST endpoint and consume the response as a server-sent events stream.
        The underlying connection is released when the returned generator is exhausted or closed.

        Parameters:
            method (str): Request method.
            path (str): Endpoint path.
            body (dict): Request JSON body.
            response_type (type): Event type.
        """
        logger.debug("%s %s (stream)", method, path)
        adapter = TypeAdapter(response_type)
        with request(
            method=method,
            url=f"{self.api_url}{path}",
            json=body,
            headers={ **self.__get_headers(), "Accept": "text/event-stream" },
            stream=True
        ) as response:
            if not response.ok:
                data = _parse_response_payload(response)
                raise MunaAPIError(_get_error_message(data), response.status_code)
            for event in _parse_sse_events(response.iter_lines(decode_unicode=True)):
                yield adapter.validate_python(event)

    def download(
        self,
        url: str,
        path: Path,
        *,
        progress: bool=False
    ) -> Path:
        """
        Download a file.

        Parameters:
            url (str): File URL.
            path (Path): Destination path.
            progress (bool): Whether to show download progress.
        """
        from .resources import download_resource
        return download_resource(url, path, client=self, progress=progress)

    def __get_headers(self) -> dict[str, str]:
        headers = { "Content-Type": "application/json" }
        if self.access_key:
            headers["Authorization"] = f"Bearer {self.access_key}"
        return headers

class MunaAPIError(Exception):
    """
    Muna API error.

    Members:
        message (str): Error message.
        status_code (int): HTTP status code.
    """

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"MunaAPIError: {self.message} (Status Code: {self.status_code})"

def _parse_response_payload(response: Response) -> object:
    try:
        return response.json()
    except (JSONDecodeError, ValueError):
        return response.text or None

def _get_error_message(payload: object) -> str:
    if isinstance(payload, dict):
        errors = payload.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            return errors[0].get("message", "An unknown error occurred")
    if isinstance(payload, str) and payload:
        return payload
    return "An unknown error occurred"

def _parse_sse_events(lines: Iterator[str]) -> Iterator[dict[str, object]]:
    """
    Parse server-sent events into `{ "event": ..., "data": ... }` dictionaries.
    """
    event_name = None
    data_lines = list[str]()
    for line in lines:
        if line is None:
            continue
        if line == "":
            if data_lines:
                yield _create_sse_event(event_name, data_lines)
            event_name = None
            data_lines = []
            continue
        if line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        value = value[1:] if value.startswith(" ") else value
        match field:
            case "event":   event_name = value
            case "data":    data_lines.append(value)
            case _:         pass
    if data_lines:
        yield _create_sse_event(event_name, data_lines)

def _create_sse_event(event_name: str | None, data_lines: list[str]) -> dict[str, object]:
    raw = "\n".join(data_lines)
    try:
        data = loads(raw)
    except JSONDecodeError:
        data = raw
    return { "event": event_name or "message", "data": data }
