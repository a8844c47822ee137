"""
Parameterized GraphQL templates for zone and account analytics.

The generated text is not executed or validated here; unknown metric or
dimension names surface later as upstream GraphQL errors.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

MIN_LIMIT = 1
MAX_LIMIT = 10000
DEFAULT_LIMIT = 100

QUERY_TEMPLATES = {
    # Daily HTTP request groups for one zone
    "zone": """
query ZoneAnalytics($zoneId: String!, $filter: ZoneAnalyticsFilter!) {{
  viewer {{
    zones(filter: {{ zoneTag: $zoneId }}) {{
      httpRequests1dGroups(limit: {limit}, filter: $filter) {{
        dimensions {{
          {dimensions}
        }}
        sum {{
          {metric}
        }}
        uniq {{
          uniques
        }}
      }}
    }}
  }}
}}
""",
    # Daily HTTP request groups across one account
    "account": """
query AccountAnalytics($accountId: String!, $filter: AccountAnalyticsFilter!) {{
  viewer {{
    accounts(filter: {{ accountTag: $accountId }}) {{
      httpRequests1dGroups(limit: {limit}, filter: $filter) {{
        dimensions {{
          {dimensions}
        }}
        sum {{
          {metric}
        }}
        uniq {{
          uniques
        }}
      }}
    }}
  }}
}}
""",
}


@dataclass
class TimeRange:
    """ISO-8601 bounds of an analytics query."""

    since: str
    until: str

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "TimeRange":
        return cls(since=data["since"], until=data["until"])


def _build_filter(time_range: TimeRange, filters: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    # Caller filters overwrite the date bounds on conflict
    return {"date_geq": time_range.since, "date_leq": time_range.until, **(filters or {})}


def _render(
    template_name: str, metric: str, dimensions: Optional[List[str]], limit: int
) -> str:
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise ValueError(f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}, got {limit}")
    return QUERY_TEMPLATES[template_name].format(
        limit=limit,
        dimensions="\n".join(dimensions or []),
        metric=metric,
    )


def build_zone_analytics_query(
    zone_id: str,
    metric: str,
    time_range: TimeRange,
    dimensions: Optional[List[str]] = None,
    filters: Optional[Dict[str, Any]] = None,
    limit: int = DEFAULT_LIMIT,
) -> Dict[str, Any]:
    """
    Build a zone analytics query.

    Returns:
        ``{"query": str, "variables": {"zoneId", "filter"}}``
    """
    return {
        "query": _render("zone", metric, dimensions, limit),
        "variables": {"zoneId": zone_id, "filter": _build_filter(time_range, filters)},
    }


def build_account_analytics_query(
    account_id: str,
    metric: str,
    time_range: TimeRange,
    dimensions: Optional[List[str]] = None,
    filters: Optional[Dict[str, Any]] = None,
    limit: int = DEFAULT_LIMIT,
) -> Dict[str, Any]:
    """Account-level counterpart of build_zone_analytics_query."""
    return {
        "query": _render("account", metric, dimensions, limit),
        "variables": {"accountId": account_id, "filter": _build_filter(time_range, filters)},
    }
