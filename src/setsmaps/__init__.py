"""
setsmaps - Small set and map exercises.

Includes:
1. Symmetric two-letter word pairs found in linear time
2. Column value counts for a header-less census file
3. Case- and whitespace-insensitive anagram checks
4. A summary of the USGS daily earthquake feed

Example:
    from setsmaps import find_pairs

    for pair in find_pairs(["am", "at", "ma", "if", "fi"]):
        print(pair)
"""

from .anagrams import is_anagram
from .degrees import DegreeSummaryConfig, summarize_degrees
from .earthquakes import FeedConfig, FeedError, earthquake_daily_summary
from .models import EarthquakeEvent, SymmetricPair
from .pairs import find_pairs, find_symmetric_pairs

try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0+unknown"
    __version_tuple__ = (0, 0, 0, "+unknown")

__all__ = [
    "DegreeSummaryConfig",
    "EarthquakeEvent",
    "FeedConfig",
    "FeedError",
    "SymmetricPair",
    "__version__",
    "__version_tuple__",
    "earthquake_daily_summary",
    "find_pairs",
    "find_symmetric_pairs",
    "is_anagram",
    "summarize_degrees",
]
