"""AWS infrastructure: client wrapper and API handlers."""
