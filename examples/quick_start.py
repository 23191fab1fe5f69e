"""Quick Start Example

Builds a pyramid over a synthetic random walk and reads it back at a few
zoom levels, the way a plot would when the viewport changes width.
"""

import sys
import os
# Add parent directory to path for development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np
import logging
from mipmap1d import MipMap1D

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

# Random walk with drift
np.random.seed(42)
n = 100_000
x = np.cumsum(np.random.randn(n)) + 0.01 * np.arange(n)

logger.info("mipmap1d Quick Start\n")

mipmap = MipMap1D(x)
logger.info("%r", mipmap)
for level, values in enumerate(mipmap):
    logger.info("level %2d: %6d points, mean %.3f", level, len(values), values.mean())

logger.info("\nZoom levels")
for width in [4000, 800, 120]:
    level = mipmap.level_for_length(width)
    logger.info("%4d px -> level %d (%d points)", width, level, len(mipmap.get_level(level)))

logger.info("\nOut of range")
logger.info("get_level(%d) -> %s", mipmap.num_levels(), mipmap.get_level(mipmap.num_levels()))
