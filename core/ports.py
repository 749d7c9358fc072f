from typing import Iterable, Optional, Protocol, Sequence

from domain.vocabulary.schema import (
    EnrichmentResult,
    LexicalInfo,
    LookupResult,
    VocabularyEntry,
)


class WordSelector(Protocol):
    def select(
        self,
        entries: Sequence[VocabularyEntry],
        count: int,
        level: Optional[str] = None,
    ) -> list[VocabularyEntry]: ...


class LexiconIO(Protocol):
    def lookup(self, word: str) -> LookupResult: ...

    def fetch_one(self, word: str) -> Optional[LexicalInfo]: ...

    def fetch_many(self, words: Iterable[str]) -> EnrichmentResult: ...

    def close(self) -> None: ...
