"""Host runtime integrations."""
