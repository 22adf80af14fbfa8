"""
Segmentation module for splitting combat log events into matches.
"""

from .matches import MatchSegmenter, is_gsf_event, split_events, split_file, get_player_id_list

__all__ = ["MatchSegmenter", "is_gsf_event", "split_events", "split_file", "get_player_id_list"]
