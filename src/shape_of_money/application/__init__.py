"""Application layer: sync orchestration, commands and queries."""
