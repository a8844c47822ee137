"""GraphQL schema introspection and keyword search."""

from .data_classes import (INTERNAL_TYPE_PREFIX, ArgDescriptor, ArgMatch,
                           EnumValueDescriptor, EnumValueMatch,
                           FieldDescriptor, FieldMatch, SchemaOverview,
                           SearchResult, TypeDescriptor, TypeKind, TypeMatch,
                           TypeRef, TypeSummary, is_internal_type)
from .introspection import fetch_schema_overview, fetch_type_details
from .search import DEFAULT_MAX_DETAILS_TO_FETCH, SchemaSearchEngine

__all__ = [
    "ArgDescriptor",
    "ArgMatch",
    "DEFAULT_MAX_DETAILS_TO_FETCH",
    "EnumValueDescriptor",
    "EnumValueMatch",
    "FieldDescriptor",
    "FieldMatch",
    "INTERNAL_TYPE_PREFIX",
    "SchemaOverview",
    "SchemaSearchEngine",
    "SearchResult",
    "TypeDescriptor",
    "TypeKind",
    "TypeMatch",
    "TypeRef",
    "TypeSummary",
    "fetch_schema_overview",
    "fetch_type_details",
    "is_internal_type",
]
