"""
Model reply -> (score, roast level).

Parsing a score out of free text is best-effort: a reply without a
"NN/100" marker still yields a usable score, drawn at random from
LIVE_FALLBACK_RANGE.
"""
from __future__ import annotations

import random
import re
from typing import Optional, Sequence, Tuple

from resume_roast.models.schemas import RoastLevel

# ASCII digits only
SCORE_PATTERN = re.compile(r"([0-9]+)/100")

LIVE_FALLBACK_RANGE: Tuple[int, int] = (70, 99)
DEMO_SCORE_RANGE: Tuple[int, int] = (65, 89)

TierTable = Sequence[Tuple[int, RoastLevel]]

# (minimum score, level), checked top to bottom; below the last row is NUCLEAR.
LIVE_TIERS: TierTable = (
    (90, RoastLevel.MILD),
    (75, RoastLevel.MEDIUM),
    (60, RoastLevel.SPICY),
)

# Demo mode has always used these cut-offs.
DEMO_TIERS: TierTable = (
    (85, RoastLevel.MILD),
    (75, RoastLevel.MEDIUM),
    (65, RoastLevel.SPICY),
)


def roast_level_for(score: int, tiers: TierTable = LIVE_TIERS) -> RoastLevel:
    for minimum, level in tiers:
        if score >= minimum:
            return level
    return RoastLevel.NUCLEAR


def extract_score(
    reply: str,
    rng: Optional[random.Random] = None,
    fallback_range: Tuple[int, int] = LIVE_FALLBACK_RANGE,
) -> int:
    """
    Return the integer from the first "<digits>/100" in the reply.

    Never raises for string input. When nothing matches, or the digits are
    too long to convert, returns a random integer in fallback_range
    (inclusive on both ends).
    """
    match = SCORE_PATTERN.search(reply or "")
    if match:
        try:
            return int(match.group(1))
        except ValueError:
            # past the int-string conversion limit
            pass
    rng = rng or random.Random()
    return rng.randint(*fallback_range)


def parse_reply(reply: str, rng: Optional[random.Random] = None) -> Tuple[int, RoastLevel]:
    score = extract_score(reply, rng=rng)
    return score, roast_level_for(score, LIVE_TIERS)
