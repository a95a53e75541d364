"""Benchmarks package for mcstate.

This package contains performance benchmarking tools measuring:
- State table construction time
- Forward and reverse state lookups
- Placement resolution through behaviors
- Memory held by state tables

To run all benchmarks:
    python -m benchmarks.benchmark

To run a specific benchmark:
    python -m benchmarks.benchmark --lookup
"""

import sys
from pathlib import Path

# Add the parent directory to Python path to ensure mcstate can be imported
sys.path.insert(0, str(Path(__file__).parent.parent))
