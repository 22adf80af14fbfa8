"""
Main combat log parser that coordinates file naming, reading and tokenization.
"""

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .events import Event
from .tokenizer import LineTokenizer


logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Pattern: combat_2016-01-15_20_37_08_109597.txt
FILE_NAME_PATTERN = re.compile(
    r"^combat_(\d{4}-\d{2}-\d{2}_\d{2}_\d{2}_\d{2}_\d{6})\.txt$"
)
FILE_NAME_TIME_FORMAT = "%Y-%m-%d_%H_%M_%S_%f"


def parse_file_name(file_path: PathLike) -> Optional[datetime]:
    """
    Parse the file name of the given CombatLog file.

    Args:
        file_path: Path (or bare name) of a CombatLog file

    Returns:
        Creation time encoded in the name, or None if it does not match
    """
    match = FILE_NAME_PATTERN.match(Path(file_path).name)
    if not match:
        return None

    try:
        return datetime.strptime(match.group(1), FILE_NAME_TIME_FORMAT)
    except ValueError:
        return None


class CombatLogParser:
    """
    Parser for CombatLog files.

    Handles file name dating, file reading and line tokenization.
    """

    def __init__(self, encoding: str = "utf-8", errors: str = "ignore"):
        """
        Initialize the combat log parser.

        Args:
            encoding: Text encoding of the CombatLog files
            errors: Decoding error handler passed to open()
        """
        self.tokenizer = LineTokenizer()
        self.encoding = encoding
        self.errors = errors
        self.current_file: Optional[Path] = None
        self.events_processed = 0

    def parse_file(self, file_path: PathLike) -> Optional[List[Event]]:
        """
        Parse a CombatLog file into events.

        Args:
            file_path: Path to the CombatLog file

        Returns:
            Events of all parseable lines in file order, or None if the
            file name does not carry a date
        """
        file_path = Path(file_path)
        created = parse_file_name(file_path)
        if created is None:
            logger.warning(f"Cannot determine date from file name: {file_path.name}")
            return None

        self.current_file = file_path
        logger.info(f"Starting parse of {file_path.name}")

        with open(file_path, "r", encoding=self.encoding, errors=self.errors) as f:
            lines = [line.rstrip("\n") for line in f]

        events = self.parse_lines(lines, created.date())

        logger.info(
            f"Completed parsing {file_path.name}: "
            f"{len(events)} events, {len(lines) - len(events)} rejected lines"
        )
        return events

    def parse_lines(self, lines: Iterable[str], day: date) -> List[Event]:
        """
        Parse lines belonging to a single day and return events.

        Args:
            lines: Raw CombatLog lines without line terminators
            day: Date the lines were logged on

        Returns:
            List of Event objects, malformed lines omitted
        """
        events = []
        for line in lines:
            event = self.tokenizer.parse_line(line, day)
            if event is not None:
                self.events_processed += 1
                events.append(event)
        return events

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with parsing stats
        """
        return {
            "file": str(self.current_file) if self.current_file else None,
            "events_processed": self.events_processed,
            "tokenizer_stats": self.tokenizer.get_stats(),
        }

    def reset(self):
        """Reset parser state for new file."""
        self.tokenizer = LineTokenizer()
        self.events_processed = 0
        self.current_file = None


def file_to_events(file_path: PathLike, encoding: str = "utf-8") -> Optional[List[Event]]:
    """
    Read the lines from a file and parse them into events.

    The date of every event is provided by the file name. If the file name
    cannot be parsed, the result is None.
    """
    return CombatLogParser(encoding=encoding).parse_file(file_path)
