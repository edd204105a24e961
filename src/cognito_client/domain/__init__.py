"""Domain layer: ports, exceptions and value objects."""
