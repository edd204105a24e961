"""Command-line host for the user pool client resource.

Each invocation runs one lifecycle action over a JSON document::

    {"id": "<client id>", "config": {...declared fields...}, "state": {...prior state...}}

and prints the resulting ``{"id": ..., "state": ...}`` document to stdout.
``import`` takes ``{"import_id": "<user_pool_id>/<client_id>"}`` instead.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable, Optional

from cognito_client._package import __version__
from cognito_client.cli.console import print_error, print_json, print_success, print_warning
from cognito_client.config.manager import ConfigurationManager
from cognito_client.domain.base.exceptions import DomainException, ResourceValidationError
from cognito_client.infrastructure.factories.resource_factory import ResourceFactory
from cognito_client.infrastructure.logging.logger import setup_logging
from cognito_client.resource.resource_data import ResourceData
from cognito_client.resource.schema import validate_config
from cognito_client.resource.user_pool_client import (
    USER_POOL_CLIENT_SCHEMA,
    UserPoolClientResource,
)

ACTIONS: dict[str, str] = {
    "validate": "Validate declared configuration",
    "plan": "Show which fields change and which force replacement",
    "create": "Create the client from declared configuration",
    "read": "Refresh state from the remote client",
    "update": "Apply changed fields to the remote client",
    "delete": "Delete the remote client",
    "import": "Adopt an existing client by <user_pool_id>/<client_id>",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="cognito-client",
        description="Manage a Cognito user pool client from a declarative document",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a JSON or YAML configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument("--region", help="AWS region")
    parser.add_argument("--profile", help="AWS credentials profile")
    parser.add_argument("--endpoint-url", help="Override the cognito-idp endpoint")

    subparsers = parser.add_subparsers(dest="action", required=True)
    for action, help_text in ACTIONS.items():
        action_parser = subparsers.add_parser(action, help=help_text)
        source = action_parser.add_mutually_exclusive_group(required=True)
        source.add_argument("--data", help="Input document as a JSON string")
        source.add_argument("-f", "--file", help="Path to a JSON input document")

    return parser


def load_document(args: argparse.Namespace) -> dict[str, Any]:
    """Read the input document from --data or --file."""
    try:
        if args.file:
            document = json.loads(Path(args.file).read_text(encoding="utf-8"))
        else:
            document = json.loads(args.data)
    except (OSError, json.JSONDecodeError) as e:
        raise ResourceValidationError(f"Cannot read input document: {e}") from e

    if not isinstance(document, dict):
        raise ResourceValidationError("Input document must be a JSON object")
    return document


def _data(resource: UserPoolClientResource, document: dict[str, Any], with_config: bool) -> ResourceData:
    return resource.new_data(
        resource_id=document.get("id"),
        config=document.get("config", {}) if with_config else None,
        state=document.get("state"),
    )


def _result(data: ResourceData) -> dict[str, Any]:
    state = data.state()
    return {"id": state.pop("id"), "state": state}


def run_validate(document: dict[str, Any], _factory: Callable[[], UserPoolClientResource]) -> dict:
    validate_config(USER_POOL_CLIENT_SCHEMA, document.get("config", {}))
    return {"valid": True}


def run_plan(document: dict[str, Any], _factory: Callable[[], UserPoolClientResource]) -> dict:
    config = document.get("config", {})
    validate_config(USER_POOL_CLIENT_SCHEMA, config)
    data = ResourceData(
        USER_POOL_CLIENT_SCHEMA,
        resource_id=document.get("id"),
        config=config,
        state=document.get("state"),
    )
    return {"changes": data.changed_fields(), "replaces": data.replacement_fields()}


def run_create(document: dict[str, Any], factory: Callable[[], UserPoolClientResource]) -> dict:
    validate_config(USER_POOL_CLIENT_SCHEMA, document.get("config", {}))
    resource = factory()
    data = _data(resource, document, with_config=True)
    resource.create(data)
    return _result(data)


def run_read(document: dict[str, Any], factory: Callable[[], UserPoolClientResource]) -> dict:
    resource = factory()
    data = _data(resource, document, with_config=False)
    resource.read(data)
    if not data.id:
        print_warning("Client no longer exists")
    return _result(data)


def run_update(document: dict[str, Any], factory: Callable[[], UserPoolClientResource]) -> dict:
    validate_config(USER_POOL_CLIENT_SCHEMA, document.get("config", {}))
    resource = factory()
    data = _data(resource, document, with_config=True)

    replaces = data.replacement_fields()
    if replaces:
        raise ResourceValidationError(
            f"Fields cannot be updated in place: {', '.join(replaces)}",
            {key: "change requires replacement" for key in replaces},
        )

    resource.update(data)
    return _result(data)


def run_delete(document: dict[str, Any], factory: Callable[[], UserPoolClientResource]) -> dict:
    resource = factory()
    data = _data(resource, document, with_config=False)
    resource.delete(data)
    return {"id": data.id, "deleted": True}


def run_import(document: dict[str, Any], factory: Callable[[], UserPoolClientResource]) -> dict:
    import_id = document.get("import_id")
    if not import_id:
        raise ResourceValidationError("import_id is required", {"import_id": "required"})
    return _result(factory().import_state(import_id))


HANDLERS: dict[str, Callable[[dict[str, Any], Callable[[], UserPoolClientResource]], dict]] = {
    "validate": run_validate,
    "plan": run_plan,
    "create": run_create,
    "read": run_read,
    "update": run_update,
    "delete": run_delete,
    "import": run_import,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config_manager = ConfigurationManager(
            args.config,
            overrides={
                "aws": {
                    "region": args.region,
                    "profile": args.profile,
                    "endpoint_url": args.endpoint_url,
                },
                "logging": {"level": args.log_level},
            },
        )
        setup_logging(config_manager.get_logging_config())

        document = load_document(args)
        factory = ResourceFactory(config_manager)
        result = HANDLERS[args.action](document, factory.create_user_pool_client_resource)
    except ResourceValidationError as e:
        print_error(e.message)
        for key, reason in sorted(e.field_errors.items()):
            print_error(f"  {key}: {reason}")
        return 1
    except DomainException as e:
        print_error(e.message)
        return 1

    print_json(result)
    if args.action in ("create", "update", "delete", "import"):
        print_success(f"{args.action} completed")
    return 0


def cli_main() -> None:
    """Entry point function for console scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
