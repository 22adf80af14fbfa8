"""
Match detection and segmentation for CombatLog events.

A match is a run of consecutive GSF events. Events involving an @-qualified
actor (the player's character or companion on the ground) close the match
that is currently open.
"""

import logging
from typing import Iterable, List, Optional, Set

from ..parser.events import Event, is_gsf_event
from ..parser.parser import PathLike, file_to_events


logger = logging.getLogger(__name__)

Match = List[Event]


class MatchSegmenter:
    """
    Splits an ordered event sequence into GSF matches.

    A match is only emitted once a non-GSF event closes it. Events still
    open at the end of the input are dropped unless ``flush_trailing`` is
    set, so a log that ends during a match yields one match less.
    """

    def __init__(self, flush_trailing: bool = False):
        self.flush_trailing = flush_trailing

    def split(self, events: Iterable[Event]) -> List[Match]:
        """
        Split events into matches.

        Args:
            events: Events of a single CombatLog in file order

        Returns:
            List of matches in the order they were closed
        """
        in_match = False
        match: Match = []
        matches: List[Match] = []

        for event in events:
            if is_gsf_event(event):
                in_match = True
                match.append(event)
            elif in_match:
                matches.append(match)
                match = []
                in_match = False

        if in_match:
            if self.flush_trailing:
                matches.append(match)
            else:
                logger.debug(f"Dropping unclosed match of {len(match)} events at end of log")

        return matches


def split_events(events: Iterable[Event], flush_trailing: bool = False) -> List[Match]:
    """Split a sequence of events into separate matches."""
    return MatchSegmenter(flush_trailing=flush_trailing).split(events)


def split_file(file_path: PathLike, flush_trailing: bool = False) -> Optional[List[Match]]:
    """Split a file into separate lists of matches."""
    events = file_to_events(file_path)
    if events is None:
        return None
    return split_events(events, flush_trailing=flush_trailing)


def get_player_id_list(events: Iterable[Event]) -> Set[str]:
    """Determine the player ID numbers of a list of events."""
    return {
        event.source_id
        for event in events
        if event.source_id and event.is_self_targeted
    }
