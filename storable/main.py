"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or imports one JSON file from the command line.
"""

import argparse
import json
import sys
from pathlib import Path

import uvicorn

from storable.bootstrap import bootstrap_create_application, bootstrap_create_registry
from storable.collection import collection_import_json_payload
from storable.config import config_load_settings
from storable.domain import StorableError
from storable.observability import observability_configure_logging


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when reading or importing the file fails.
    """

    argument_parser = argparse.ArgumentParser(description="Storable importer runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "import-file"),
        help="Runtime command: `api` starts server, `import-file` imports one JSON file and prints the collection",
        type=str,
    )
    argument_parser.add_argument(
        "type_name",
        nargs="?",
        type=str,
        help="Registered storable type name for `import-file`",
    )
    argument_parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="JSON file path for `import-file`",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()

    if parsed_arguments.command == "import-file":
        if parsed_arguments.type_name is None or parsed_arguments.path is None:
            argument_parser.error("import-file requires TYPE_NAME and PATH")
        observability_configure_logging(log_level=settings.log_level, json_output=settings.log_json_output)
        registry = bootstrap_create_registry(settings=settings)
        try:
            import_result = collection_import_json_payload(
                registry=registry,
                type_name=parsed_arguments.type_name,
                payload=parsed_arguments.path.read_bytes(),
            )
        except (StorableError, OSError) as error:
            print(f"{type(error).__name__}: {error}", file=sys.stderr)
            raise SystemExit(1) from error
        print(json.dumps(import_result.items, indent=2))
        return

    application = bootstrap_create_application(settings=settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
