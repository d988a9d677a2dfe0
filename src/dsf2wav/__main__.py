"""Allow running as ``python -m dsf2wav``."""

import sys
from dsf2wav.cli import main

sys.exit(main())
