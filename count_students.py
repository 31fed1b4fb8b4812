#!/usr/bin/env python3
"""
Roster Reporter
Reads a CSV student roster, counts the students and groups their first names
by field of study.
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import config

logger = logging.getLogger(__name__)

LOAD_FAILURE_MESSAGE = 'Cannot load the database'


class LoadFailure(Exception):
    """Raised when the roster database cannot be read, whatever the cause."""

    def __init__(self, message: str = LOAD_FAILURE_MESSAGE):
        super().__init__(message)


@dataclass
class Roster:
    """Students parsed from one roster file."""
    total: int = 0
    fields: Dict[str, List[str]] = field(default_factory=dict)


def load_database(path: str) -> str:
    """Read the whole roster file as text.

    Args:
        path: Path to the roster CSV file

    Returns:
        The file contents

    Raises:
        LoadFailure: if the file is missing, unreadable or not valid UTF-8
    """
    logger.info(f"Loading roster database from {path}")
    try:
        with open(path, 'r', encoding=config.FILE_ENCODING) as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error loading roster database {path}: {e}")
        raise LoadFailure() from e


def parse_roster(text: str) -> Roster:
    """Count students and group first names by field.

    The first non-blank line is the header. Field labels keep the order in
    which they are first seen and names keep file order.
    """
    lines = [line for line in text.strip().split('\n') if line.strip()]
    roster = Roster(total=max(len(lines) - 1, 0))

    for line in lines[1:]:
        values = line.rstrip('\r').split(',')
        first_name = values[config.NAME_COLUMN]
        if len(values) > config.FIELD_COLUMN:
            field_name = values[config.FIELD_COLUMN]
        else:
            # short record, accepted as-is
            logger.warning(f"Record has fewer than {config.FIELD_COLUMN + 1} fields: {line!r}")
            field_name = ''

        if field_name not in roster.fields:
            roster.fields[field_name] = []
        roster.fields[field_name].append(first_name)

    logger.info(f"Parsed {roster.total} students across {len(roster.fields)} fields")
    return roster


def format_report(roster: Roster) -> List[str]:
    report = [f"Number of students: {roster.total}"]
    for field_name, names in roster.fields.items():
        report.append(
            f"Number of students in {field_name}: {len(names)}. List: {', '.join(names)}"
        )
    return report


def count_students(path: str) -> Roster:
    """Print the student count and the per-field lists for a roster file.

    Args:
        path: Path to the roster CSV file

    Returns:
        The parsed roster

    Raises:
        LoadFailure: if the file cannot be read
    """
    roster = parse_roster(load_database(path))
    for line in format_report(roster):
        print(line)
    return roster


def main(argv: Optional[List[str]] = None) -> int:
    """Main function for the count-students command."""
    parser = argparse.ArgumentParser(
        description="Count students in a CSV roster and list them by field."
    )
    parser.add_argument(
        "database",
        nargs="?",
        default=config.DATABASE_PATH,
        help="Path to the roster CSV file (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    config.setup_logging()

    try:
        count_students(args.database)
    except LoadFailure as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
