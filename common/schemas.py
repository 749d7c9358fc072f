from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from core.versions import DOCUMENT_SCHEMA_VERSION
from domain.vocabulary.schema import LexicalInfo, VocabularyEntry

# ---------- Output document ----------


class WordReport(BaseModel):
    entry: VocabularyEntry
    lexical_info: Optional[LexicalInfo] = None  # None: not found / lookup failed


class RunDocument(BaseModel):
    """
    What a run writes to output/output.json.
    Apart from generated_at, the serialized bytes depend only on the inputs.
    """

    schema_version: str = DOCUMENT_SCHEMA_VERSION
    generated_at: datetime
    total_words: int = Field(ge=0)
    words: list[WordReport] = Field(default_factory=list)
