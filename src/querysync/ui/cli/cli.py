"""Command line interface for querysync."""

import sys
from typing import final

from querysync.ui.cli.args import ArgumentParser
from querysync.ui.cli.args.options import CLIArgs, ClassifyArgs, FetchArgs
from querysync.ui.cli.commands import ClassifyCommand, FetchCommand, ModalCommand
from querysync.platform.logging import logger


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ClassifyArgs):
                _ = ClassifyCommand(args).execute()
                return

            if isinstance(args, FetchArgs):
                result = FetchCommand(args).execute()
                if result.error is not None:
                    sys.exit(1)
                return

            _ = ModalCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit`` inside :class:`CommandProcessor`.
    """
    CommandProcessor.process_command()
    return 0


if __name__ == "__main__":
    sys.exit(main())
