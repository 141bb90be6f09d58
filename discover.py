#!/usr/bin/env python3
"""
Datadog Logs Import - discovery and end-to-end harness CLI

Entry point script for running without installation.
For installed usage, run: dd-logs-import
"""

import sys
from pathlib import Path

# Add src to path for direct execution without installation
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from dd_logs_import.cli import main

if __name__ == "__main__":
    main()
