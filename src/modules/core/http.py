"""Helpers for reading request bodies and query strings in views."""

from __future__ import annotations

from typing import Any, Dict

from rest_framework.request import Request

from modules.core.exceptions import MalformedInput


def request_body(request: Request) -> Dict[str, Any]:
    """Return the parsed JSON body, which must be an object."""
    data = request.data
    if not isinstance(data, dict):
        raise MalformedInput("Request body must be a JSON object.")
    return data


def required_query_param(request: Request, name: str) -> str:
    value = request.query_params.get(name)
    if value is None or not value.strip():
        raise MalformedInput(f"Required request parameter '{name}' is missing")
    return value
