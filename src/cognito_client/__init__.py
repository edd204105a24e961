"""Cognito user pool client resource plugin.

Manages the lifecycle of an Amazon Cognito user pool client for a
declarative infrastructure host runtime.

Key Components:
    - resource: schema, resource data and the CRUD adapter
    - providers: AWS client wrapper and Cognito API handler
    - config: configuration schemas and loading
    - infrastructure: logging setup and adapters
    - host: host runtime integrations (Pulumi dynamic provider)
    - cli: command-line host

Usage:
    >>> cognito-client create --data '{"config": {"name": "web", "user_pool_id": "us-east-1_abc"}}'
"""

from cognito_client._package import __version__

__all__: list[str] = ["__version__"]
