"""
Event record for CombatLog lines.
"""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict


# Marks a non-player actor (companion, NPC) in source and target ids
NPC_MARKER = "@"


@dataclass(frozen=True)
class Event:
    """A single parsed CombatLog line."""

    raw_line: str
    timestamp: datetime
    source_id: str
    target_id: str
    ability_name: str
    effect_type: str
    effect_name: str
    amount: int = 0
    is_critical: bool = False

    @property
    def is_gsf_event(self) -> bool:
        """Whether this event belongs to a GSF match."""
        return is_gsf_event(self)

    @property
    def is_self_targeted(self) -> bool:
        return self.source_id == self.target_id

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = asdict(self)
        data["timestamp"] = self.timestamp.isoformat()
        return data


def is_gsf_event(event: Event) -> bool:
    """
    Determine whether an event is part of a GSF match.

    Neither the source nor the target may be an @-qualified actor.
    """
    return NPC_MARKER not in event.source_id and NPC_MARKER not in event.target_id
