"""Ports the engine needs from the host canvas."""

from shape_of_money.domain.canvas.ports.document_mutator import DocumentMutator
from shape_of_money.domain.canvas.ports.document_view import DocumentView

__all__ = [
    "DocumentMutator",
    "DocumentView",
]
