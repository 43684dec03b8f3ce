"""Domain layer of the budget consistency engine."""
