"""In-memory TF-IDF search over the lines of a text."""

from line_search.search.engine import SearchEngine
from line_search.search.models import IndexStats, Line, RankedLine


__all__ = ["IndexStats", "Line", "RankedLine", "SearchEngine"]
__version__ = "0.1.0"
