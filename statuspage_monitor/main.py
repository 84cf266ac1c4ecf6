"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service, runs one health check, or sets a state on status-page components.
"""

import argparse

import uvicorn

from statuspage_monitor.bootstrap import (
    bootstrap_create_application,
    bootstrap_create_health_monitor,
    bootstrap_create_status_page_client,
)
from statuspage_monitor.config import config_load_settings
from statuspage_monitor.jobs import job_handle_status_update_event
from statuspage_monitor.log import setup_logging


def main_build_argument_parser() -> argparse.ArgumentParser:
    """Build the runtime argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser.
    """

    argument_parser = argparse.ArgumentParser(description="Status page monitor runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "check", "set-status"),
        help="Runtime command: `api` starts server, `check` runs one probe and publishes the result, "
        "`set-status` publishes an explicit state",
        type=str,
    )
    argument_parser.add_argument(
        "--status",
        dest="status",
        type=str,
        help="State for `set-status`, as code (1-5) or name such as `under_maintenance`",
    )
    argument_parser.add_argument(
        "--component-ids",
        dest="component_ids",
        type=str,
        help="Comma separated component ids for `set-status`; defaults to COMPONENT_IDS",
    )
    argument_parser.add_argument(
        "--page-id",
        dest="page_id",
        type=str,
        help="Optional page id override for `set-status`",
    )
    return argument_parser


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when a command fails.
    """

    parsed_arguments = main_build_argument_parser().parse_args(argv)
    settings = config_load_settings()
    setup_logging(log_level=settings.log_level)

    if parsed_arguments.command == "check":
        health_state = bootstrap_create_health_monitor(settings).monitor_update_status()
        if health_state is None:
            print("STATE: none")
            raise SystemExit(1)
        print(f"STATE: {health_state.status_page_value} ({int(health_state)})")
        return

    if parsed_arguments.command == "set-status":
        if not parsed_arguments.status:
            raise SystemExit("--status is required for `set-status`")
        try:
            summary = job_handle_status_update_event(
                event={"body": {"status": parsed_arguments.status, "componentIds": parsed_arguments.component_ids}},
                status_page_client=bootstrap_create_status_page_client(settings),
                default_component_ids=settings.component_ids or None,
                page_id=parsed_arguments.page_id,
            )
        except ValueError as error:
            raise SystemExit(str(error)) from error
        for result in summary.results:
            print(f"{result.component_id}: {'ok' if result.succeeded else result.error}")
        if summary.failed_component_ids:
            raise SystemExit(1)
        return

    application = bootstrap_create_application()
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
