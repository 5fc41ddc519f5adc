"""Allow running as ``python -m lifeboard``."""

import sys

from .frontends.cli import main

sys.exit(main())
