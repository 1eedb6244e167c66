"""Annotation extraction from search strings."""

from .items import extract_items
from .brackets import BracketType, extract_bracketed_text
from .parameters import extract_parameters
from .components import QueryComponents, query_components

__all__ = [
    "extract_items",
    "BracketType",
    "extract_bracketed_text",
    "extract_parameters",
    "QueryComponents",
    "query_components",
]
