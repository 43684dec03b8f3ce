"""Application ports."""

from shape_of_money.application.ports.document_store import (
    ChangeListener,
    DocumentChange,
    DocumentStore,
)

__all__ = [
    "ChangeListener",
    "DocumentChange",
    "DocumentStore",
]
