#!/usr/bin/env python3
"""
fqdnkit - Main Entry Point

Direct execution entry point.
Usage: python main.py -f names.txt --strict
"""

import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent))

# Import and run the CLI
if __name__ == "__main__":
    from fqdnkit.cli.commands import main
    main()
