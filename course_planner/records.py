#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Parse one line of the course data file into a Course.

Expected columns: course number, title, [prereq1, prereq2, ...]
Malformed lines are reported as Defects, never raised.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

DELIMITER = ","
COMMENT_PREFIXES = ("//", "#")
BOM = "\ufeff"

# -------------------------
# Types
# -------------------------

class Course(BaseModel):
    code: str
    title: str
    prerequisites: List[str] = Field(default_factory=list)

@dataclass
class Defect:
    line: int
    kind: str  # "format" | "duplicate"
    message: str

    def __str__(self) -> str:
        return self.message

def format_defect(line_no: int) -> Defect:
    return Defect(
        line=line_no,
        kind="format",
        message=f"line {line_no}: format error (need at least course number and title)",
    )

def duplicate_defect(line_no: int, code: str) -> Defect:
    return Defect(
        line=line_no,
        kind="duplicate",
        message=f"line {line_no}: duplicate course '{code}' (overwriting previous entry)",
    )

# -------------------------
# Helpers
# -------------------------

def canonical_code(text: Optional[str]) -> str:
    """Normalize a course number: trimmed and uppercase ("csci101 " -> "CSCI101")"""
    return (text or "").strip().upper()

def split_fields(line: str) -> List[str]:
    # No quoting: a comma inside a title splits the title.
    parts = line.split(DELIMITER)
    if line.endswith(DELIMITER):
        # a trailing delimiter closes the last field, it does not open a new one
        parts.pop()
    return [f.strip() for f in parts]

def is_skippable(line: str) -> bool:
    return not line or line.startswith(COMMENT_PREFIXES)

def parse_line(raw: str, line_no: int, first: bool = False) -> Tuple[Optional[Course], Optional[Defect]]:
    """
    Parse a single raw line.

    Returns (course, None) for a record line, (None, defect) for a line with
    fewer than two fields, and (None, None) for blank or comment lines.
    `first` should stay True until the first non-skipped line has been parsed,
    so a UTF-8 byte-order mark at the top of the file is dropped.
    """
    line = raw.strip()
    if first and line.startswith(BOM):
        line = line[len(BOM):].strip()

    if is_skippable(line):
        return None, None

    fields = split_fields(line)
    if len(fields) < 2:
        return None, format_defect(line_no)

    course = Course(
        code=canonical_code(fields[0]),
        title=fields[1],
        # empty trailing fields ("CSCI300,Title,,") are dropped
        prerequisites=[canonical_code(f) for f in fields[2:] if f],
    )
    return course, None
