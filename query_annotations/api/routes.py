"""FastAPI routes for the annotation extractors."""

import logging
from fastapi import APIRouter, HTTPException
from .schemas import (
    ItemsRequest,
    ItemsResponse,
    BracketsRequest,
    BracketsResponse,
    ParametersRequest,
    ParametersResponse,
    ComponentsRequest,
    ComponentsResponse,
    FormatDateRequest,
    FormatDateResponse,
    HealthResponse,
)
from ..errors import DuplicateKeyError, InvalidArgumentError
from ..extraction import (
    extract_items,
    extract_bracketed_text,
    extract_parameters,
    query_components,
)
from ..text import format_with_date
from ..config import settings
from .. import __version__

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Check service health."""
    return HealthResponse(status="healthy", version=__version__)


@router.post("/items", response_model=ItemsResponse)
async def items(request: ItemsRequest):
    """Split a delimited list into trimmed, non-empty items."""
    try:
        return ItemsResponse(items=extract_items(request.query, request.separator))
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/brackets", response_model=BracketsResponse)
async def brackets(request: BracketsRequest):
    """Extract [tags], {tags}, (tags) or @tags from a query."""
    remainder, tags = extract_bracketed_text(request.query, request.bracket_type)
    return BracketsResponse(remainder=remainder, tags=tags)


@router.post("/parameters", response_model=ParametersResponse)
async def parameters(request: ParametersRequest):
    """
    Extract key:value pairs from a query.

    A key that appears twice is a conflict (409).
    """
    force_lower = request.force_keys_lower_case
    if force_lower is None:
        force_lower = settings.force_keys_lower_case

    try:
        remainder, values = extract_parameters(request.query, force_lower)
    except DuplicateKeyError as e:
        logger.info(f"Rejected parameters query: {e}")
        raise HTTPException(status_code=409, detail=str(e))

    return ParametersResponse(remainder=remainder, settings=values)


@router.post("/components", response_model=ComponentsResponse)
async def components(request: ComponentsRequest):
    """Split a full text search into query text, interests, tags and organizations."""
    result = query_components(request.query)
    return ComponentsResponse(
        query_text=result.query_text,
        interests=result.interests,
        tags=result.tags,
        organizations=result.organizations,
    )


@router.post("/format-date", response_model=FormatDateResponse)
async def format_date(request: FormatDateRequest):
    """Replace {date patterns} in a template with the given or current date."""
    try:
        text = format_with_date(request.template, request.date or request.kind)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return FormatDateResponse(text=text)
