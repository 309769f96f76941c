"""Request building exports."""

from .request_builder import (
    BodyPreparationError,
    PreparedRequest,
    RequestConstructionError,
    append_query,
    build_body,
    build_headers,
    build_query,
    build_url,
    prepare_request,
)

__all__ = [
    "BodyPreparationError",
    "RequestConstructionError",
    "PreparedRequest",
    "build_url",
    "build_headers",
    "build_query",
    "append_query",
    "build_body",
    "prepare_request",
]
