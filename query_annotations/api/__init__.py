"""API routes and schemas."""

from .routes import router
from .schemas import (
    ItemsRequest,
    BracketsRequest,
    ParametersRequest,
    ComponentsRequest,
    FormatDateRequest,
    HealthResponse,
)

__all__ = [
    "router",
    "ItemsRequest",
    "BracketsRequest",
    "ParametersRequest",
    "ComponentsRequest",
    "FormatDateRequest",
    "HealthResponse",
]
