"""Allow ``python -m recipe_catalog``."""

import sys

from recipe_catalog.cli import main


sys.exit(main())
