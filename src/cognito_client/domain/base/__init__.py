"""Domain base building blocks."""
