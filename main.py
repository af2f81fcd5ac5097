# -*- coding: utf-8 -*-
"""
main.py - Strategy wizard entry point

Puts src/ on the path when running from a checkout and hands over to the
click CLI (which loads .env and configures logging).

Usage:
    python main.py run
    python main.py recommend --goal move_schemas_data --access direct_access --tables mixed_partitions
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from strategy_wizard.cli import main  # noqa: E402


if __name__ == "__main__":
    main()
