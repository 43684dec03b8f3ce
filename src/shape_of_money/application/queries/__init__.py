"""Application queries."""

from shape_of_money.application.queries.container_summary_query import (
    ContainerSummaryQuery,
)

__all__ = ["ContainerSummaryQuery"]
