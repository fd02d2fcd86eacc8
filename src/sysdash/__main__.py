"""Allow running sysdash with ``python -m sysdash``."""

import sys

from sysdash.app import main

sys.exit(main())
