#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Course planner: interactive advising menu over a course data file.

Usage:
  course-planner                      # interactive menu
  course-planner --data courses.csv   # preload, then menu
  course-planner --data courses.csv --list
  course-planner --data courses.csv --course csci300
"""

import argparse
import logging
import sys
from typing import List, Optional

from .catalog import CatalogLoadError, CourseCatalog, format_prerequisites
from .config import DATA_FILE_ENV, configure_logging, default_data_file
from .records import canonical_code

logger = logging.getLogger(__name__)

MENU = """
1. Load Data Structure.
2. Print Course List.
3. Print Course.
9. Exit

What would you like to do? """

# -------------------------
# Presentation
# -------------------------

def load_data(catalog: CourseCatalog, filename: str) -> bool:
    """Load `filename` into the catalog and report the outcome. Returns True if any course loaded."""
    try:
        count, defects = catalog.load(filename)
    except CatalogLoadError as e:
        print(f"Error: {e}")
        return False

    if count:
        print(f"Loaded {count} courses from '{filename}'.")
    else:
        print(f"No courses were loaded from '{filename}'.")

    # non-fatal issues, so the user can fix the file
    for d in defects:
        print(f"Warning: {d}")
    return count > 0

def print_course_list(catalog: CourseCatalog) -> None:
    print("Here is a sample schedule:\n")
    for course in catalog:
        print(f"{course.code}, {course.title}")
    print()

def print_course(catalog: CourseCatalog, query: str) -> bool:
    course = catalog.find(query)
    if course is None:
        print(f"Sorry, I don't have a course with ID '{canonical_code(query)}'.")
        return False
    print(f"{course.code}, {course.title}")
    print(f"Prerequisites: {format_prerequisites(catalog, course)}")
    return True

def print_missing_prerequisites(catalog: CourseCatalog) -> None:
    missing = catalog.missing_prerequisites()
    if not missing:
        print("All prerequisites are present in the catalog.")
        return
    for code, prereqs in missing.items():
        print(f"{code}: {', '.join(prereqs)}")

# -------------------------
# Menu loop
# -------------------------

def _read(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None

def run_menu(catalog: CourseCatalog) -> int:
    print("Welcome to the course planner.")
    loaded = catalog.is_loaded

    while True:
        raw = _read(MENU)
        if raw is None:
            print()
            break
        choice = raw.strip()
        if not choice:
            continue
        if not choice.isdecimal():
            print(f"{choice} is not a valid option.")
            continue

        option = int(choice)
        if option == 1:
            filename = (_read("Enter the name of the data file: ") or "").strip()
            loaded = load_data(catalog, filename)
        elif option == 2:
            if not loaded:
                print("Please load the data first (Option 1) before printing the course list.")
                continue
            print_course_list(catalog)
        elif option == 3:
            if not loaded:
                print("Please load the data first (Option 1) before printing a course.")
                continue
            query = _read("What course do you want to know about? ")
            if query is None:
                print()
                break
            print_course(catalog, query)
        elif option == 9:
            print("Thank you for using the course planner!")
            break
        else:
            print(f"{option} is not a valid option.")
    return 0

# -------------------------
# CLI
# -------------------------

def parse_args(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Browse a course data file and its prerequisites.")
    ap.add_argument("--data", dest="data", default=default_data_file(),
                    help=f"Course data file to load at startup (default: ${DATA_FILE_ENV})")
    ap.add_argument("--list", dest="list_courses", action="store_true",
                    help="Print the sorted course list and exit")
    ap.add_argument("--course", dest="course", default=None,
                    help="Print one course with its prerequisites and exit")
    ap.add_argument("--missing", dest="missing", action="store_true",
                    help="Print prerequisites that reference unknown courses and exit")
    ap.add_argument("-v", "--verbose", dest="verbose", action="store_true",
                    help="Enable debug logging")
    return ap.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    catalog = CourseCatalog()
    one_shot = args.list_courses or args.course is not None or args.missing

    if one_shot and not args.data:
        print(f"Error: --data (or ${DATA_FILE_ENV}) is required with --list, --course or --missing",
              file=sys.stderr)
        return 2

    if args.data and not load_data(catalog, args.data) and one_shot:
        return 1

    if not one_shot:
        return run_menu(catalog)

    status = 0
    if args.list_courses:
        print_course_list(catalog)
    if args.course is not None and not print_course(catalog, args.course):
        status = 1
    if args.missing:
        print_missing_prerequisites(catalog)
    logger.debug("Exiting with status %d", status)
    return status

if __name__ == "__main__":
    sys.exit(main())
