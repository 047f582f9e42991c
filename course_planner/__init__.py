"""Load a course data file and answer course list / prerequisite queries."""

from .catalog import CatalogLoadError, CourseCatalog, LoadResult, format_prerequisites
from .records import Course, Defect, canonical_code, parse_line

__all__ = [
    "CatalogLoadError",
    "Course",
    "CourseCatalog",
    "Defect",
    "LoadResult",
    "canonical_code",
    "format_prerequisites",
    "parse_line",
]
