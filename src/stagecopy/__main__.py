"""Allow ``python -m stagecopy``."""

import sys

from stagecopy.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
