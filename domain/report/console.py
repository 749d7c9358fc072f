from typing import Sequence

from common.constants import (
    REPORT_MAX_DEFINITIONS,
    REPORT_MAX_EXAMPLES,
    REPORT_MAX_SYNONYMS,
    REPORT_RULE,
)
from domain.vocabulary.schema import EnrichmentResult, LexicalInfo, VocabularyEntry


def _format_frequency(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def _lexical_lines(info: LexicalInfo) -> list[str]:
    lines = [f"Pronunciation: {info.pronunciation or 'N/A'}"]

    if info.definitions:
        lines.append("Definitions:")
        for d in info.definitions[:REPORT_MAX_DEFINITIONS]:
            lines.append(f"  • ({d.part_of_speech}) {d.text}")

    if info.examples:
        lines.append("Examples:")
        for example in info.examples[:REPORT_MAX_EXAMPLES]:
            lines.append(f"  • {example}")

    if info.synonyms:
        lines.append(f"Synonyms: {', '.join(info.synonyms[:REPORT_MAX_SYNONYMS])}")

    return lines


def render_report(
    selected: Sequence[VocabularyEntry], enrichment: EnrichmentResult
) -> str:
    """Human-readable report, one block per selected word."""
    lines = ["", "=== SELECTED WORDS ===", ""]

    if not selected:
        lines.append("No words selected.")

    for entry in selected:
        lines.append(f"Word: {entry.word}")
        lines.append(f"CEFR Level: {entry.level}")
        lines.append(f"Part of Speech: {entry.part_of_speech}")
        if entry.frequency is not None:
            lines.append(f"Frequency: {_format_frequency(entry.frequency)}")

        info = enrichment.get(entry.word)
        if info is not None:
            lines.extend(_lexical_lines(info))

        lines.append(REPORT_RULE)

    return "\n".join(lines)
