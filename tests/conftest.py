"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from datetime import datetime

from gsflog.parser.events import Event


LOG_NAME = "combat_2016-01-15_20_37_08_109597.txt"

GROUND_LINE = (
    "[20:37:10.001] [@Bruce] [@Bruce] [] "
    "[Event {836045448945472}: EnterCombat {836045448945489}] ()"
)
GSF_DAMAGE_LINE = (
    "[20:37:12.345] [3056] [3071] [Quad Laser Cannon {3290928496246784}] "
    "[ApplyEffect {836045448945477}: Damage {836045448945501}] "
    "(1234* energy {836045448940874})"
)
GSF_SELF_LINE = (
    "[20:37:13.500] [3056] [3056] [Distortion Field {3244319837225216}] "
    "[ApplyEffect {836045448945477}: Distortion Field {3244319837225216}] ()"
)


@pytest.fixture
def sample_log_lines():
    """Sample CombatLog lines: ground, match, ground, match, ground."""
    return [
        GROUND_LINE,
        GSF_DAMAGE_LINE,
        GSF_SELF_LINE,
        "[20:37:14.000] [3071] [3056] [Rapid-fire Laser Cannon {3290928496246785}] "
        "[ApplyEffect {836045448945477}: Damage {836045448945501}] (512 energy {836045448940874})",
        "[20:45:00.000] [@Bruce] [@Bruce:Companion] [Heal {1}] "
        "[ApplyEffect {836045448945477}: Heal {836045448945500}] (300)",
        "this line is garbage",
        "[20:50:00.000] [3102] [3102] [Engine Maneuver {3290928496246786}] "
        "[Event {836045448945472}: AbilityActivate {836045448945479}] ()",
        "[20:50:01.000] [3102] [3140] [Slug Railgun {3290928496246787}] "
        "[ApplyEffect {836045448945477}: Damage {836045448945501}] (2650* kinetic {836045448940873})",
        "[20:55:00.000] [@Bruce] [@Bruce] [] "
        "[Event {836045448945472}: ExitCombat {836045448945490}] ()",
    ]


@pytest.fixture
def combat_log(tmp_path, sample_log_lines):
    """A correctly named CombatLog file containing the sample lines."""
    path = tmp_path / LOG_NAME
    path.write_text("\n".join(sample_log_lines) + "\n", encoding="utf-8")
    return path


def build_event(source_id: str, target_id: str, second: int = 0, amount: int = 0) -> Event:
    """Create an event with only the actor ids and time of interest."""
    return Event(
        raw_line=f"[{source_id}] [{target_id}]",
        timestamp=datetime(2016, 1, 15, 20, 0, second),
        source_id=source_id,
        target_id=target_id,
        ability_name="Quad Laser Cannon",
        effect_type="ApplyEffect",
        effect_name="Damage",
        amount=amount,
    )


@pytest.fixture
def make_event():
    """Factory for synthetic events."""
    return build_event
