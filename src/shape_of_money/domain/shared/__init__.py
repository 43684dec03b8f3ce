"""Shared domain components.

This module exports shared exceptions and amount text helpers used
across domain boundaries.
"""

from shape_of_money.domain.shared.amount_text import (
    coerce_amount,
    format_amount,
    parse_amount_label,
    round_amount,
)
from shape_of_money.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "ConflictError",
    # Amount text
    "coerce_amount",
    "format_amount",
    "parse_amount_label",
    "round_amount",
]
