"""Analytics query generators."""

from .query_templates import (TimeRange, build_account_analytics_query,
                              build_zone_analytics_query)

__all__ = ["TimeRange", "build_account_analytics_query", "build_zone_analytics_query"]
