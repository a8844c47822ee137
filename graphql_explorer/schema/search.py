"""Bounded two-pass keyword search over a GraphQL type graph."""

import logging
from typing import List, Optional

from ..graphql_client import AccountScope, GraphQLClient
from .data_classes import (ArgMatch, EnumValueMatch, FieldMatch,
                           SchemaOverview, SearchResult, TypeDescriptor,
                           TypeKind, TypeMatch, is_internal_type)
from .introspection import fetch_schema_overview, fetch_type_details

logger = logging.getLogger(__name__)

DEFAULT_MAX_DETAILS_TO_FETCH = 10

_CONTAINER_KINDS = (TypeKind.OBJECT.value, TypeKind.INTERFACE.value)


def _contains(text: Optional[str], needle: str) -> bool:
    return bool(text) and needle in text.lower()


def _match_reason(label: str, name: str, description: Optional[str], needle: str, keyword: str) -> Optional[str]:
    """Name wins over description; at most one reason per entity."""
    if _contains(name, needle):
        return f'{label} name contains "{keyword}"'
    if _contains(description, needle):
        return f'{label} description contains "{keyword}"'
    return None


class SchemaSearchEngine:
    """
    Searches type names first, then fields, arguments and enum values of a
    bounded candidate set of types fetched one at a time.
    """

    def __init__(self, client: GraphQLClient, scope: AccountScope):
        self.client = client
        self.scope = scope

    async def search(
        self,
        keyword: str,
        max_details_to_fetch: int = DEFAULT_MAX_DETAILS_TO_FETCH,
        include_internal_types: bool = False,
    ) -> SearchResult:
        """
        Run both passes for ``keyword``.

        Args:
            keyword: Case-insensitive substring to look for
            max_details_to_fetch: Upper bound on types fetched in the deep pass
            include_internal_types: Keep ``__``-prefixed types in scan and results

        Returns:
            SearchResult with all four match collections

        Raises:
            UpstreamTransportError: If the seeding overview fetch fails
        """
        overview = await fetch_schema_overview(self.client, self.scope)
        result = SearchResult(keyword=keyword)

        result.types = self.scan_types(overview, keyword, include_internal_types)
        candidates = self.build_candidates(overview, result.types, max_details_to_fetch)
        logger.info(f"Search '{keyword}': {len(result.types)} type matches, examining {len(candidates)} types")

        for type_name in candidates:
            try:
                type_details = await fetch_type_details(self.client, self.scope, type_name)
            except Exception as e:
                logger.error(f"Error fetching details for type {type_name}: {e}")
                continue
            if type_details is None:
                continue
            self.scan_type_details(type_details, keyword, result)

        if not include_internal_types:
            self._drop_internal_matches(result)
        return result

    def scan_types(
        self, overview: SchemaOverview, keyword: str, include_internal_types: bool = False
    ) -> List[TypeMatch]:
        """Shallow pass over the flat type list."""
        needle = keyword.lower()
        matches = []
        for summary in overview.types:
            if not include_internal_types and is_internal_type(summary.name):
                continue
            reason = _match_reason("Type", summary.name, summary.description, needle, keyword)
            if reason:
                matches.append(TypeMatch(summary.name, summary.kind, summary.description, reason))
        return matches

    def build_candidates(
        self, overview: SchemaOverview, type_matches: List[TypeMatch], max_details_to_fetch: int
    ) -> List[str]:
        """Matched types, then root types, then object/interface types; deduplicated and truncated."""
        ordered = [m.name for m in type_matches]
        ordered.extend(overview.root_type_names())
        ordered.extend(
            t.name for t in overview.types if t.kind in _CONTAINER_KINDS and not is_internal_type(t.name)
        )
        candidates = list(dict.fromkeys(ordered))
        return candidates[: max(max_details_to_fetch, 0)]

    def scan_type_details(self, type_details: TypeDescriptor, keyword: str, result: SearchResult):
        """Deep pass over one fetched type, appending into ``result``."""
        needle = keyword.lower()
        type_name = type_details.name

        for field in type_details.fields or []:
            reason = _match_reason("Field", field.name, field.description, needle, keyword)
            if reason:
                result.fields.append(FieldMatch(type_name, field.name, field.description, reason))

            for arg in field.args:
                reason = _match_reason("Argument", arg.name, arg.description, needle, keyword)
                if reason:
                    result.args.append(ArgMatch(type_name, field.name, arg.name, arg.description, reason))

        for enum_value in type_details.enum_values or []:
            if _contains(enum_value.name, needle):
                reason = f'Enum value contains "{keyword}"'
            elif _contains(enum_value.description, needle):
                reason = f'Enum value description contains "{keyword}"'
            else:
                continue
            result.enum_values.append(
                EnumValueMatch(type_name, enum_value.name, enum_value.description, reason)
            )

    @staticmethod
    def _drop_internal_matches(result: SearchResult):
        result.types = [m for m in result.types if not is_internal_type(m.owner_type)]
        result.fields = [m for m in result.fields if not is_internal_type(m.owner_type)]
        result.args = [m for m in result.args if not is_internal_type(m.owner_type)]
        result.enum_values = [m for m in result.enum_values if not is_internal_type(m.owner_type)]
