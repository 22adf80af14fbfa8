"""
Line tokenizer for parsing CombatLog lines.
"""

import logging
from datetime import date, datetime, time
from typing import Dict, List, Optional

from .events import Event


logger = logging.getLogger(__name__)


def remove_id_number(s: str) -> str:
    """
    Remove the ID number of an ability or effect from a string.

    Example:
        Laser Cannon {3290928496246784} -> Laser Cannon
    """
    return s.split("{", 1)[0].strip()


class LineTokenizer:
    """
    Tokenizes individual lines from CombatLog files.

    Lines consist of five bracketed fields followed by the amount field:
    "[time] [source] [target] [ability {id}] [type {id}: effect {id}] (amount)"
    """

    FIELD_COUNT = 6
    CRIT_MARKER = "*"

    def __init__(self):
        self.line_count = 0
        self.error_count = 0

    def parse_line(self, line: str, day: date) -> Optional[Event]:
        """
        Parse a single CombatLog line into an Event.

        Args:
            line: Raw line from a CombatLog file
            day: Calendar date the line's time of day belongs to

        Returns:
            Event object or None if the line is malformed
        """
        self.line_count += 1

        event = self._tokenize(line, day)
        if event is None:
            self.error_count += 1
            logger.debug(f"Rejected line {self.line_count}: {line[:100]!r}")
        return event

    def _tokenize(self, line: str, day: date) -> Optional[Event]:
        fields = self._split_fields(line)
        if len(fields) != self.FIELD_COUNT:
            return None

        try:
            time_of_day = time.fromisoformat(fields[0])
        except ValueError:
            return None
        if time_of_day.tzinfo is not None:
            return None
        timestamp = datetime.combine(day, time_of_day)

        effect_parts = fields[4].split(":")
        if len(effect_parts) != 2:
            return None
        effect_type, effect_name = (remove_id_number(part) for part in effect_parts)

        damage = self._damage_token(fields[5])
        amount_str = damage.replace(self.CRIT_MARKER, "")
        if amount_str and not amount_str.isdecimal():
            return None

        return Event(
            raw_line=line,
            timestamp=timestamp,
            source_id=fields[1],
            target_id=fields[2],
            ability_name=remove_id_number(fields[3]),
            effect_type=effect_type,
            effect_name=effect_name,
            amount=int(amount_str) if amount_str else 0,
            is_critical=self.CRIT_MARKER in damage,
        )

    def _split_fields(self, line: str) -> List[str]:
        """
        Split a line on closing brackets into stripped fields.

        An amount field written in brackets, "[(1234*)]", leaves an empty
        piece after its closing bracket, which is not a field of its own.
        """
        fields = [self._strip_field(piece) for piece in line.split("]")]
        if len(fields) == self.FIELD_COUNT + 1 and not fields[-1] and fields[-2].startswith("("):
            fields = fields[:-1]
        return fields

    @staticmethod
    def _strip_field(piece: str) -> str:
        piece = piece.strip()
        if piece.startswith("["):
            piece = piece[1:]
        return piece

    @staticmethod
    def _damage_token(field: str) -> str:
        """
        Extract the leading damage token from the amount field.

        "(1234* energy {836045448940874}) <1234>" -> "1234*"
        """
        if field.startswith("("):
            close = field.rfind(")")
            if close > 0:
                field = field[1:close]
        return field.split(" ")[0]

    def get_stats(self) -> Dict[str, float]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with line_count and error_count
        """
        return {
            "lines_processed": self.line_count,
            "errors": self.error_count,
            "success_rate": (self.line_count - self.error_count) / max(self.line_count, 1),
        }


def line_to_event(line: str, day: date) -> Optional[Event]:
    """Parse an event line into an Event instance."""
    return LineTokenizer().parse_line(line, day)
