"""Package metadata."""

PACKAGE_NAME = "cognito-client-plugin"
__version__ = "0.1.0"
