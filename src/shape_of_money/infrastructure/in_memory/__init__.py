"""In-memory adapters."""

from shape_of_money.infrastructure.in_memory.in_memory_document_store import (
    InMemoryDocumentStore,
)

__all__ = ["InMemoryDocumentStore"]
