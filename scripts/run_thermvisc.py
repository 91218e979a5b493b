#!/usr/bin/env python3
"""``thermvisc`` single-batch runner.

Usage:
    echo "1 2 3 4 5 6 7 8 9" | python scripts/run_thermvisc.py --decay-factor 0
    python scripts/run_thermvisc.py scripts/user_config.py
    python scripts/run_thermvisc.py scripts/user_config.py --source readings.txt -v

Note: User config in scripts/user_config.py, expert defaults in
thermvisc/schemas/param.py
"""

import sys

from thermvisc.cli import main


if __name__ == "__main__":
    sys.exit(main())
