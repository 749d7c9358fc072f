import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Sequence, Union

from common.schemas import RunDocument, WordReport
from domain.vocabulary.schema import EnrichmentResult, VocabularyEntry

logger = logging.getLogger(__name__)


def build_document(
    selected: Sequence[VocabularyEntry],
    enrichment: EnrichmentResult,
    generated_at: Optional[datetime] = None,
) -> RunDocument:
    """Pair every selected entry with its enrichment (None when missing), in selection order."""
    return RunDocument(
        generated_at=generated_at or datetime.now(timezone.utc),
        total_words=len(selected),
        words=[
            WordReport(entry=entry, lexical_info=enrichment.get(entry.word))
            for entry in selected
        ],
    )


def to_json(document: RunDocument) -> str:
    return document.model_dump_json(indent=2)


def save_document(document: RunDocument, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = to_json(document)
    path.write_text(payload, encoding="utf-8")

    logger.info("Results saved to: %s (%d characters)", path, len(payload))
    return path


def load_document(path: Union[str, Path]) -> RunDocument:
    return RunDocument.model_validate_json(Path(path).read_text(encoding="utf-8"))
