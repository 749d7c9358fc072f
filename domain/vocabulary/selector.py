import logging
import random
from typing import Optional, Sequence

from domain.vocabulary.schema import VocabularyEntry

logger = logging.getLogger(__name__)


def filter_by_level(
    entries: Sequence[VocabularyEntry], level: Optional[str]
) -> list[VocabularyEntry]:
    """Keep entries whose level matches `level` (case-insensitive). No level keeps all."""
    if not level or not level.strip():
        return list(entries)
    wanted = level.strip().casefold()
    return [e for e in entries if e.level.strip().casefold() == wanted]


class RandomWordSelector:
    """
    Draws a uniform random sample of entries without replacement.
    Same seed + same input -> same output; seed=None is non-deterministic.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def select(
        self,
        entries: Sequence[VocabularyEntry],
        count: int,
        level: Optional[str] = None,
    ) -> list[VocabularyEntry]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        logger.info(
            "Selecting %d of %d words (level filter: %s)",
            count,
            len(entries),
            level or "None",
        )

        candidates = filter_by_level(entries, level)
        if level:
            logger.info("Words after level filtering: %d", len(candidates))

        if not candidates:
            logger.info("No words found matching criteria")
            return []

        n = min(count, len(candidates))
        # sample() draws without replacement and returns the picks in draw order
        selected = self._random.sample(candidates, n)

        logger.info("Selected %d words: %s", len(selected), ", ".join(e.word for e in selected))
        return selected
