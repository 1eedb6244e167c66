"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from pydantic import BaseModel, Field

from ..extraction import BracketType
from ..text import DateKind


class ItemsRequest(BaseModel):
    """Request to split a delimited list."""

    query: str = Field(..., description="Delimited list, e.g. 'abc, def, ghi'")
    separator: str = Field(default=",", min_length=1, max_length=1, description="Item separator")


class ItemsResponse(BaseModel):
    """Trimmed, non-empty items in order."""

    items: list[str]


class BracketsRequest(BaseModel):
    """Request to extract bracketed text."""

    query: str = Field(..., description="Query with bracketed annotations")
    bracket_type: BracketType = Field(default=BracketType.SQUARE, description="square, curly, round or at")


class BracketsResponse(BaseModel):
    """Query without the bracketed regions, plus the tags."""

    remainder: str
    tags: list[str]


class ParametersRequest(BaseModel):
    """Request to extract key:value pairs."""

    query: str = Field(..., description="Query with key:value pairs")
    force_keys_lower_case: bool | None = Field(
        default=None,
        description="Lower-case the keys (defaults to the server setting)"
    )


class ParametersResponse(BaseModel):
    """Query without the pairs, plus the pairs."""

    remainder: str
    settings: dict[str, str]


class ComponentsRequest(BaseModel):
    """Request to decompose a full text search."""

    query: str = Field(default="", description="Full text search with {interests}, [tags] and @Orgs")


class ComponentsResponse(BaseModel):
    """Decomposed full text search."""

    query_text: str
    interests: list[str]
    tags: list[str]
    organizations: list[str]


class FormatDateRequest(BaseModel):
    """Request to fill {date patterns} in a template."""

    template: str = Field(..., description="Text with {yyyy-MM-dd} style patterns")
    kind: DateKind = Field(default=DateKind.UTC, description="Clock to read when no date is given")
    date: datetime | None = Field(default=None, description="Explicit date to format")


class FormatDateResponse(BaseModel):
    """Filled template."""

    text: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
