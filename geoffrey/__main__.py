"""python -m geoffrey"""

import sys

from geoffrey.cli import main

sys.exit(main())
