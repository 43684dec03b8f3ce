"""Document object types known to the engine."""

from enum import Enum


class CanvasObjectType(str, Enum):
    """Type tags of canvas objects.

    Hosts may store other types; the engine ignores them.
    """

    BUDGET_ITEM = "budget-item"
    CONTAINER = "container"
    ALLOCATION_LINK = "allocation-link"
    CONTAINER_SUMMARY = "container-summary"
