"""Allow `python -m brickstone`."""

import sys

from brickstone.cli import main

sys.exit(main())
