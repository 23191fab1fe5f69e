"""
mipmap1d: multi-resolution pyramids of one-dimensional series.

Builds every pairwise-averaged level of a series up front so that any level
of detail can be read back without recomputation.
"""

from .core import MipMap1D, downsample
from .io_adapters import from_pandas, load_series
from .config import MipMapConfig

__version__ = "0.1.0"

__all__ = [
    'MipMap1D',
    'downsample',
    'from_pandas',
    'load_series',
    'MipMapConfig',
]
