"""Allow ``python -m comment_explorer``."""

import sys

from comment_explorer.cli import main

sys.exit(main())
