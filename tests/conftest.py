from pathlib import Path

import pytest

from course_planner.catalog import CourseCatalog

SAMPLE_LINES = [
    "CSCI100,Introduction to Computer Science",
    "CSCI101,Introduction to Programming in C++,CSCI100",
    "CSCI200,Data Structures,CSCI101",
    "MATH201,Discrete Mathematics",
    "CSCI300,Introduction to Algorithms,CSCI200,MATH201",
]


@pytest.fixture
def write_data(tmp_path):
    """Write lines to a data file and return its path."""

    def _write(lines, name="courses.csv", encoding="utf-8"):
        path = Path(tmp_path) / name
        path.write_text("\n".join(lines) + "\n", encoding=encoding)
        return path

    return _write


@pytest.fixture
def sample_file(write_data):
    return write_data(SAMPLE_LINES)


@pytest.fixture
def catalog():
    return CourseCatalog()
