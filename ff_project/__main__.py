"""Allow ``python -m ff_project``."""

import sys

from ff_project.installer import main

sys.exit(main())
