#!/usr/bin/env python3
#
# PROJECT: torus-cli-renderer
# MODULE: client_torus.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from torus_cli_renderer.cli import main


if __name__ == "__main__":
    sys.exit(main())
