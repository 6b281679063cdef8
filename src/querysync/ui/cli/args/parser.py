"""Command line argument parser."""

import argparse
import json
import logging
import os
import sys
from collections.abc import Sequence
from typing import final

from querysync.config.config import Config
from querysync.config.settings import API_BASE_URL, REQUEST_TIMEOUT_SECONDS
from querysync.features.modal import ModalMode
from querysync.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from querysync.ui.cli.args.options import CLIArgs, ClassifyArgs, FetchArgs, ModalArgs

_ENV_TOKEN = "QUERYSYNC_TOKEN"


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="querysync - inspect error classification, modal URL state and cached API reads.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        classify_parser = subparsers.add_parser(
            "classify",
            help="Classify a raw failure given as JSON",
        )
        _ = classify_parser.add_argument(
            "payload",
            type=str,
            help='Raw failure as JSON, e.g. \'{"status": 404}\'',
            metavar="JSON",
        )
        ArgumentParser._add_verbosity(classify_parser)

        modal_parser = subparsers.add_parser(
            "modal",
            help="Read or rewrite the modal parameters of a URL",
        )
        _ = modal_parser.add_argument("url", type=str, help="URL to read or rewrite", metavar="URL")
        _ = modal_parser.add_argument(
            "action",
            choices=("read", "open", "close"),
            help="Operation to apply to the URL",
        )
        _ = modal_parser.add_argument(
            "--id-param",
            required=True,
            help="Query parameter carrying the entity id (e.g. locationId)",
        )
        _ = modal_parser.add_argument(
            "--modal-param",
            help="Query parameter carrying the modal mode (defaults to configuration)",
        )
        _ = modal_parser.add_argument("--id", dest="entity_id", help="Entity id for 'open'")
        _ = modal_parser.add_argument(
            "--mode",
            help="Modal mode for 'open' (details, edit, create)",
        )
        ArgumentParser._add_verbosity(modal_parser)

        fetch_parser = subparsers.add_parser(
            "fetch",
            help="GET an API endpoint through the request cache",
        )
        _ = fetch_parser.add_argument("endpoint", type=str, help="Endpoint path, e.g. /locations/42")
        _ = fetch_parser.add_argument(
            "--base-url",
            default=API_BASE_URL,
            help="API base URL (defaults to configuration)",
        )
        _ = fetch_parser.add_argument(
            "--token",
            default=None,
            help=f"Bearer token (defaults to ${_ENV_TOKEN})",
        )
        _ = fetch_parser.add_argument(
            "--timeout",
            type=float,
            default=REQUEST_TIMEOUT_SECONDS,
            help="Request timeout in seconds",
        )
        ArgumentParser._add_verbosity(fetch_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If arguments fail validation.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "classify":
            return ArgumentParser._process_classify(parsed_args)

        if command == "modal":
            return ArgumentParser._process_modal(parsed_args)

        if command == "fetch":
            return ArgumentParser._process_fetch(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show cache and modal events",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _process_classify(parsed_args: argparse.Namespace) -> ClassifyArgs:
        try:
            payload = json.loads(parsed_args.payload)
        except json.JSONDecodeError as exc:
            logger.error("Payload is not valid JSON: %s", exc)
            sys.exit(1)

        return ClassifyArgs(
            command="classify",
            payload=payload,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_modal(parsed_args: argparse.Namespace) -> ModalArgs:
        mode: ModalMode | None = None
        if parsed_args.action == "open":
            if not parsed_args.mode:
                logger.error("--mode is required for 'open'")
                sys.exit(1)
            try:
                mode = ModalMode.from_user_input(parsed_args.mode)
            except ValueError as exc:
                logger.error("%s", exc)
                sys.exit(1)
            if mode is not ModalMode.CREATE and not parsed_args.entity_id:
                logger.error("--id is required for '%s' modals", mode.value)
                sys.exit(1)

        return ModalArgs(
            command="modal",
            url=parsed_args.url,
            id_param=parsed_args.id_param,
            modal_param=parsed_args.modal_param,
            action=parsed_args.action,
            entity_id=parsed_args.entity_id,
            mode=mode,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_fetch(parsed_args: argparse.Namespace) -> FetchArgs:
        timeout: float = parsed_args.timeout
        if timeout <= 0:
            logger.error("Timeout must be positive; received %s", timeout)
            sys.exit(1)

        return FetchArgs(
            command="fetch",
            endpoint=parsed_args.endpoint,
            base_url=parsed_args.base_url,
            token=parsed_args.token or os.environ.get(_ENV_TOKEN) or None,
            timeout=timeout,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
