"""Entry point for ``python -m distances``."""

import sys

from distances.cli import main

sys.exit(main())
