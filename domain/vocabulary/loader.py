import csv
import logging
from collections import Counter
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from common.constants import COL_FREQUENCY, COL_LEVEL, COL_POS, COL_WORD, POS_ALIASES
from domain.vocabulary.errors import LoadError, NotFoundError
from domain.vocabulary.schema import VocabularyEntry, VocabularyRow

logger = logging.getLogger(__name__)


def _column_map(fieldnames: Optional[list[str]]) -> dict[str, str]:
    """
    Map raw header names to VocabularyRow fields.
    Matching is done on trimmed, lower-cased names; unknown columns are dropped.
    """
    if not fieldnames:
        raise LoadError("CSV file has no header row")

    mapping: dict[str, str] = {}
    for raw in fieldnames:
        if raw is None:
            continue
        name = raw.strip().lower()
        if name in (COL_WORD, COL_LEVEL, COL_FREQUENCY):
            mapping.setdefault(name, raw)
        elif name in POS_ALIASES:
            mapping.setdefault(COL_POS, raw)

    if COL_WORD not in mapping:
        raise LoadError(f"CSV header has no '{COL_WORD}' column: {fieldnames}")

    return mapping


def _parse_row(record: dict, columns: dict[str, str]) -> Optional[VocabularyEntry]:
    """
    Validate one record against the row schema.
    Returns None for rows without a word.
    VocabularyRow coerces every value it is given, so plain CSV text never
    fails here; load_entries still skips a row if validation raises.
    """
    row = VocabularyRow.model_validate(
        {field: record.get(raw) for field, raw in columns.items()}
    )
    if not row.word:
        return None
    return row.to_entry()


def load_entries(path: Union[str, Path]) -> list[VocabularyEntry]:
    """
    Load CEFR vocabulary entries from a comma-separated file with a header row.

    Rows without a word are skipped. A row that fails to parse is logged and
    skipped; only an unreadable file aborts the load.
    Raises NotFoundError if the path does not exist, LoadError if the file
    cannot be read.
    """
    path = Path(path)
    logger.info("Loading words from: %s", path)

    if not path.exists():
        logger.error("File not found at %s", path)
        raise NotFoundError(f"CSV file not found: {path}")

    entries: list[VocabularyEntry] = []
    skipped = 0

    try:
        # utf-8-sig drops a BOM left by spreadsheet exports
        with path.open("r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f, delimiter=",")
            columns = _column_map(reader.fieldnames)

            for record in reader:
                try:
                    entry = _parse_row(record, columns)
                except (ValidationError, ValueError) as e:
                    skipped += 1
                    logger.warning(
                        "Failed to parse record at line %d: %s", reader.line_num, e
                    )
                    continue

                if entry is None:
                    logger.debug("Skipping row without a word at line %d", reader.line_num)
                    continue

                entries.append(entry)
    except LoadError:
        raise
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error("Error loading CSV file %s: %s", path, e)
        raise LoadError(f"Could not read CSV file {path}: {e}") from e

    levels = Counter(entry.level for entry in entries)
    logger.info("Loaded %d words (%d rows failed to parse)", len(entries), skipped)
    logger.info(
        "Level distribution: %s",
        ", ".join(f"{level or '?'}:{n}" for level, n in sorted(levels.items())),
    )

    return entries
