"""Allow running as ``python -m quoteit``."""

import sys

from quoteit.cli import main

sys.exit(main())
