import math
from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

# ---------- Dataset ----------


class VocabularyEntry(BaseModel):
    """
    One word of the CEFR dataset. Immutable once loaded.
    """

    model_config = ConfigDict(frozen=True)

    word: str = Field(min_length=1)
    level: str = ""  # CEFR tag, e.g. "B2"; compared case-insensitively
    part_of_speech: str = ""
    frequency: Optional[float] = None  # score or rank, as found in the file


class VocabularyRow(BaseModel):
    """
    Fixed shape of a dataset row. Unknown columns are dropped,
    missing ones default to empty.
    """

    model_config = ConfigDict(extra="ignore")

    word: str = ""
    level: str = ""
    pos: str = ""
    frequency: Optional[float] = None

    @field_validator("word", "level", "pos", mode="before")
    @classmethod
    def _strip_text(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    @field_validator("frequency", mode="before")
    @classmethod
    def _parse_frequency(cls, v: Any) -> Optional[float]:
        if v is None:
            return None
        text = str(v).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
        return value if math.isfinite(value) else None

    def to_entry(self) -> VocabularyEntry:
        return VocabularyEntry(
            word=self.word,
            level=self.level,
            part_of_speech=self.pos,
            frequency=self.frequency,
        )


# ---------- WordsAPI ----------


def _empty_if_none(v: Any) -> Any:
    return [] if v is None else v


def _unique(items: list[str]) -> list[str]:
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


class Definition(BaseModel):
    part_of_speech: str = Field(
        default="", validation_alias=AliasChoices("part_of_speech", "partOfSpeech")
    )
    text: str = Field(default="", validation_alias=AliasChoices("text", "definition"))
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)

    @field_validator("part_of_speech", "text", mode="before")
    @classmethod
    def _text_or_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("synonyms", "antonyms", "examples", mode="before")
    @classmethod
    def _list_or_empty(cls, v: Any) -> Any:
        return _empty_if_none(v)


class Syllables(BaseModel):
    count: int = 0
    parts: list[str] = Field(
        default_factory=list, validation_alias=AliasChoices("parts", "list")
    )

    @field_validator("parts", mode="before")
    @classmethod
    def _list_or_empty(cls, v: Any) -> Any:
        return _empty_if_none(v)


class FrequencyStats(BaseModel):
    zipf: Optional[float] = None
    per_million: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("per_million", "perMillion")
    )
    diversity: Optional[float] = None


class LexicalInfo(BaseModel):
    """
    Dictionary data for one word, built from a WordsAPI payload.
    Anything the payload leaves out becomes an empty list or None.

    WordsAPI quirks handled here:
      - definitions arrive under "results"
      - pronunciation is either a string or {"all": ..., "noun": ...}
      - frequency is either a bare zipf number or an object
      - rhymes may be nested as {"all": [...]}
    """

    word: str = ""
    pronunciation: Optional[str] = None
    audio_url: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("audio_url", "audioUrl", "audio")
    )
    definitions: list[Definition] = Field(
        default_factory=list,
        validation_alias=AliasChoices("definitions", "results"),
    )
    examples: list[str] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)
    rhymes: list[str] = Field(default_factory=list)
    syllables: Optional[Syllables] = None
    frequency: Optional[FrequencyStats] = None

    @field_validator("pronunciation", mode="before")
    @classmethod
    def _flatten_pronunciation(cls, v: Any) -> Optional[str]:
        if isinstance(v, dict):
            if v.get("all"):
                return str(v["all"])
            values = [str(x) for x in v.values() if x]
            return values[0] if values else None
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("definitions", "examples", "synonyms", "antonyms", mode="before")
    @classmethod
    def _list_or_empty(cls, v: Any) -> Any:
        return _empty_if_none(v)

    @field_validator("rhymes", mode="before")
    @classmethod
    def _flatten_rhymes(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return v.get("all") or []
        return _empty_if_none(v)

    @field_validator("frequency", mode="before")
    @classmethod
    def _frequency_from_number(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return {"zipf": v}
        return v

    @model_validator(mode="after")
    def _gather_from_definitions(self) -> "LexicalInfo":
        # Full-word responses only carry examples/synonyms per definition
        if not self.examples:
            self.examples = _unique([e for d in self.definitions for e in d.examples])
        if not self.synonyms:
            self.synonyms = _unique([s for d in self.definitions for s in d.synonyms])
        if not self.antonyms:
            self.antonyms = _unique([a for d in self.definitions for a in d.antonyms])
        return self


LookupStatus = Literal["found", "not_found", "error"]


class LookupResult(BaseModel):
    """
    Outcome of a single WordsAPI lookup. Keeps "not found" apart from
    "request failed"; fetch_one/fetch_many collapse both to None.
    """

    word: str
    status: LookupStatus
    info: Optional[LexicalInfo] = None
    detail: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == "found" and self.info is not None


# word -> dictionary data, None when the lookup failed or found nothing
EnrichmentResult = dict[str, Optional[LexicalInfo]]
