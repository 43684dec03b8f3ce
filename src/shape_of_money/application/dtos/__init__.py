"""Data transfer objects of the application layer."""

from shape_of_money.application.dtos.container_summary_dto import (
    ContainerSummaryDTO,
)
from shape_of_money.application.dtos.sync_report_dto import SyncReport

__all__ = [
    "ContainerSummaryDTO",
    "SyncReport",
]
