"""
Combat log parser module for processing CombatLog files.
"""

from .events import Event, is_gsf_event
from .tokenizer import LineTokenizer, line_to_event, remove_id_number
from .parser import CombatLogParser, file_to_events, parse_file_name

__all__ = [
    "Event",
    "is_gsf_event",
    "LineTokenizer",
    "line_to_event",
    "remove_id_number",
    "CombatLogParser",
    "file_to_events",
    "parse_file_name",
]
