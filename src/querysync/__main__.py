"""Allow ``python -m querysync``."""

import sys

from querysync.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
