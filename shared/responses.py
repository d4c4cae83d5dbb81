"""
HTTP response helpers for the hero API.

Every response carries permissive CORS headers. Successful responses are
pretty-printed JSON; failures are plain text carrying the error message.
"""

import json
from typing import Any, Optional, Dict
import azure.functions as func
from .errors import SerializationError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "*",
}

CORS_PREFLIGHT_HEADERS = {
    **CORS_HEADERS,
    "Access-Control-Allow-Headers": "Content-Type",
}

I_AM_A_TEAPOT = 418


def json_serialize(obj: Any) -> str:
    """
    Serialize object to indented JSON, using `to_dict()` where an object has one.

    Raises:
        SerializationError: If the object cannot be encoded
    """
    def default_serializer(o):
        if hasattr(o, "to_dict"):
            return o.to_dict()
        raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    try:
        return json.dumps(obj, default=default_serializer, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def success_response(
    data: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> func.HttpResponse:
    """
    Create a JSON response with CORS headers.

    Args:
        data: Response data to serialize
        status_code: HTTP status code (default: 200)
        headers: Optional additional headers

    Returns:
        Azure Functions HttpResponse
    """
    return func.HttpResponse(
        json_serialize(data),
        status_code=status_code,
        mimetype="application/json",
        headers={**CORS_HEADERS, **(headers or {})}
    )


def error_response(
    message: str,
    status_code: int = I_AM_A_TEAPOT,
    headers: Optional[Dict[str, str]] = None
) -> func.HttpResponse:
    """
    Create a plain-text error response with CORS headers.

    Args:
        message: Error message, sent as the body
        status_code: HTTP status code (default: 418)
        headers: Optional additional headers

    Returns:
        Azure Functions HttpResponse
    """
    return func.HttpResponse(
        message,
        status_code=status_code,
        mimetype="text/plain",
        headers={**CORS_HEADERS, **(headers or {})}
    )


def preflight_response() -> func.HttpResponse:
    """Create an empty 200 response answering a CORS preflight."""
    return func.HttpResponse(
        status_code=200,
        headers=dict(CORS_PREFLIGHT_HEADERS)
    )
