import logging
import time
from contextlib import closing
from datetime import datetime
from typing import Callable, Optional, Sequence

from common.schemas import RunDocument
from common.settings import Settings
from core.ports import LexiconIO, WordSelector
from domain.report.console import render_report
from domain.report.exporters import build_document, save_document
from domain.vocabulary.loader import load_entries
from domain.vocabulary.schema import EnrichmentResult, VocabularyEntry
from domain.vocabulary.selector import RandomWordSelector
from infra.wordsapi.client import WordsApiClient

logger = logging.getLogger(__name__)

ClientFactory = Callable[[Settings], LexiconIO]


def _t():
    return time.perf_counter()


def words_api_client_from_settings(settings: Settings) -> WordsApiClient:
    return WordsApiClient(
        api_key=settings.words_api_key.get_secret_value(),
        api_host=settings.words_api_host,
        base_url=settings.words_api_base_url,
        request_delay=settings.request_delay,
        timeout=settings.request_timeout,
    )


def enrich(selected: Sequence[VocabularyEntry], client: LexiconIO) -> EnrichmentResult:
    return client.fetch_many([entry.word for entry in selected])


def run_word_pipeline(
    settings: Settings,
    level: Optional[str] = None,
    count: Optional[int] = None,
    seed: Optional[int] = None,
    selector: Optional[WordSelector] = None,
    client_factory: ClientFactory = words_api_client_from_settings,
    now: Optional[datetime] = None,
) -> RunDocument:
    """
    Load -> select -> enrich -> report -> persist.

    Load errors (NotFoundError, LoadError) propagate to the caller.
    Without an API key the enrichment step is skipped and every
    entry is reported without dictionary data.
    """
    t0 = _t()

    # 1) Load
    entries = load_entries(settings.data_path)
    logger.info("Loaded %d words (%.3fs)", len(entries), _t() - t0)

    # 2) Select
    selector = selector or RandomWordSelector(seed)
    selected = selector.select(
        entries, settings.sample_size if count is None else count, level
    )

    # 3) Enrich
    t1 = _t()
    enrichment: EnrichmentResult = {}
    if not settings.has_api_key:
        logger.warning("No API key found. Skipping WordsAPI calls.")
    elif selected:
        with closing(client_factory(settings)) as client:
            enrichment = enrich(selected, client)
        found = sum(1 for info in enrichment.values() if info is not None)
        logger.info(
            "Fetched information for %d/%d words (%.3fs)",
            found,
            len(enrichment),
            _t() - t1,
        )

    # 4) Report
    print(render_report(selected, enrichment))

    # 5) Persist
    document = build_document(selected, enrichment, generated_at=now)
    save_document(document, settings.output_path)

    logger.info("Pipeline finished. Total: %.3fs", _t() - t0)
    return document
