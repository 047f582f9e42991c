#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
In-memory course catalog keyed by course number.

load() rebuilds the catalog from a data file (or any iterable of lines) and
returns the per-line Defects alongside the course count. Only an unreadable
source is fatal: it raises CatalogLoadError and leaves the catalog empty.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Union

from .records import Course, Defect, canonical_code, duplicate_defect, parse_line

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", Iterable[str]]

class CatalogLoadError(Exception):
    """The data source could not be opened or read."""

@dataclass
class LoadResult:
    count: int
    defects: List[Defect] = field(default_factory=list)

    def __iter__(self) -> Iterator[object]:
        # allows `count, defects = catalog.load(path)`
        yield self.count
        yield self.defects

class CourseCatalog:
    def __init__(self):
        self._courses: Dict[str, Course] = {}

    # ---- loading ----

    def load(self, source: Source) -> LoadResult:
        self._courses.clear()
        logger.info("Loading courses from %s", _describe(source))

        try:
            if isinstance(source, (str, os.PathLike)):
                with open(source, "r", encoding="utf-8") as f:
                    defects = self._ingest(f)
            else:
                defects = self._ingest(source)
        except (OSError, UnicodeDecodeError) as e:
            self._courses.clear()
            logger.debug("Could not read %s", _describe(source), exc_info=True)
            raise CatalogLoadError(f"Could not read course data from {_describe(source)}: {e}") from e

        for d in defects:
            logger.debug("%s", d)
        logger.info("Loaded %d courses (%d warnings)", len(self._courses), len(defects))
        return LoadResult(count=len(self._courses), defects=defects)

    def _ingest(self, lines: Iterable[str]) -> List[Defect]:
        defects: List[Defect] = []
        first = True
        for line_no, raw in enumerate(lines, 1):
            course, defect = parse_line(raw, line_no, first=first)
            if course is None and defect is None:
                continue  # blank or comment
            first = False
            if defect is not None:
                defects.append(defect)
                continue

            # last one wins
            if course.code in self._courses:
                defects.append(duplicate_defect(line_no, course.code))
            self._courses[course.code] = course
        return defects

    # ---- queries ----

    @property
    def is_loaded(self) -> bool:
        return bool(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and canonical_code(code) in self._courses

    def __iter__(self) -> Iterator[Course]:
        for code in self.sorted_codes():
            yield self._courses[code]

    def find(self, code: str) -> Optional[Course]:
        """Case-insensitive, whitespace-tolerant lookup."""
        return self._courses.get(canonical_code(code))

    def sorted_codes(self) -> List[str]:
        # plain string order: "CSCI10" sorts before "CSCI2"
        return sorted(self._courses)

    def title_for(self, code: str) -> str:
        """Exact-match title lookup; empty string when the course is unknown."""
        course = self._courses.get(code)
        return course.title if course else ""

    def missing_prerequisites(self) -> Dict[str, List[str]]:
        """
        Prerequisite codes that reference no course in the catalog, keyed by
        the course that lists them (sorted). Advisory only.
        """
        missing: Dict[str, List[str]] = {}
        for course in self:
            unknown = [p for p in course.prerequisites if p not in self._courses]
            if unknown:
                missing[course.code] = unknown
        return missing

# -------------------------
# Display helpers
# -------------------------

def format_prerequisites(catalog: CourseCatalog, course: Course) -> str:
    """Render "CSCI100 (Foundations), MATH201" style text; "None" if there are no prerequisites."""
    if not course.prerequisites:
        return "None"
    parts = []
    for pid in course.prerequisites:
        ptitle = catalog.title_for(pid)
        # a prerequisite missing from the file still shows its ID
        parts.append(f"{pid} ({ptitle})" if ptitle else pid)
    return ", ".join(parts)

def _describe(source: Source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return str(getattr(source, "name", "<stream>"))
