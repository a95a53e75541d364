"""Shared test configuration."""

import sys
from pathlib import Path

# Add project root to path to import mcstate without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))
