"""Infrastructure adapters for host documents."""
