"""Keyword-based mood classification.

Groups are checked in a fixed order and the first group with a hit wins, so
text that mentions both "rain" and "party" is Sad, not Energetic. Keywords
match as case-insensitive substrings, not whole words: "strained" contains
"rain" and classifies as Sad. Both behaviours are part of the contract;
changing either would reclassify existing inputs.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from moodmix.models.mood import CLASSIFIABLE_MOODS, Mood

logger = logging.getLogger(__name__)

# Priority order matters: first match wins.
KEYWORD_GROUPS: tuple[tuple[Mood, tuple[str, ...]], ...] = (
    (Mood.SAD, (
        "sad", "tired", "rain", "cry", "lonely", "hurt", "pain", "miss",
        "grief", "lost",
    )),
    (Mood.ENERGETIC, (
        "happy", "excited", "run", "dance", "party", "fun", "great",
        "amazing", "win",
    )),
    (Mood.DREAMY, (
        "sleep", "dream", "night", "star", "love", "memory", "remember",
        "soft", "calm",
    )),
    (Mood.FLOATING, (
        "focus", "work", "study", "space", "think", "mind", "universe",
        "deep",
    )),
)


class MoodClassifier:
    """Maps free text to a mood label.

    Args:
        groups: Ordered (mood, keywords) pairs; earlier groups take priority.
        fallback_moods: Labels to pick from when nothing matches.
        rng: Random source for the fallback pick. Defaults to an
            OS-seeded ``random.Random``.
    """

    def __init__(
        self,
        groups: Sequence[tuple[Mood, Sequence[str]]] = KEYWORD_GROUPS,
        fallback_moods: Sequence[Mood] = CLASSIFIABLE_MOODS,
        rng: random.Random | None = None,
    ) -> None:
        self.groups = tuple(
            (mood, tuple(k.lower() for k in keywords)) for mood, keywords in groups
        )
        self.fallback_moods = tuple(m for m in fallback_moods if m is not Mood.DEFAULT)
        if not self.fallback_moods:
            raise ValueError("fallback_moods must contain at least one non-default mood")
        self.rng = rng or random.Random()

    def matched_keyword(self, text: str) -> tuple[Mood, str] | None:
        """First (mood, keyword) hit in priority order, or None."""
        t = (text or "").lower()
        for mood, keywords in self.groups:
            for keyword in keywords:
                if keyword in t:
                    return mood, keyword
        return None

    def classify(self, text: str) -> Mood:
        hit = self.matched_keyword(text)
        if hit is not None:
            return hit[0]
        mood = self.rng.choice(self.fallback_moods)
        logger.debug("No mood keyword matched, random fallback picked %s", mood.value)
        return mood


_default_classifier = MoodClassifier()


def classify(text: str) -> Mood:
    """Classify with the built-in keyword groups and an OS-seeded fallback."""
    return _default_classifier.classify(text)
