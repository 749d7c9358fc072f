import logging
import time
from typing import Callable, Iterable, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from common.constants import (
    HEADER_API_HOST,
    HEADER_API_KEY,
    REQUEST_DELAY_SECONDS,
    REQUEST_TIMEOUT_SECONDS,
    STATUS_ERROR,
    STATUS_FOUND,
    STATUS_NOT_FOUND,
    WORDS_API_BASE_URL,
    WORDS_API_HOST,
)
from domain.vocabulary.schema import EnrichmentResult, LexicalInfo, LookupResult

logger = logging.getLogger(__name__)


def mask_secret(secret: str, visible: int = 4) -> str:
    if len(secret) <= visible:
        return "*" * len(secret)
    return "*" * (len(secret) - visible) + secret[-visible:]


class WordsApiClient:
    """
    Sequential WordsAPI client.

    One GET per word, paced by `request_delay` between consecutive requests.
    Remote failures never raise: they come back as LookupResult statuses
    (lookup) or as None (fetch_one / fetch_many). No caching, no retries.
    """

    def __init__(
        self,
        api_key: str,
        api_host: str = WORDS_API_HOST,
        base_url: str = WORDS_API_BASE_URL,
        request_delay: float = REQUEST_DELAY_SECONDS,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not api_key:
            raise ValueError("WordsAPI key is required")

        self.api_host = api_host
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.request_delay = request_delay
        self.timeout = timeout
        self._sleep = sleep

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {HEADER_API_KEY: api_key, HEADER_API_HOST: api_host}
        )

        logger.info(
            "Initialized WordsAPI client (host: %s, key: %s)",
            api_host,
            mask_secret(api_key),
        )

    def __enter__(self) -> "WordsApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def url_for(self, word: str) -> str:
        return f"{self.base_url}{quote(word, safe='')}"

    def lookup(self, word: str) -> LookupResult:
        url = self.url_for(word)
        logger.debug("GET %s", url)

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Request failed for '%s': %s", word, e)
            return LookupResult(word=word, status=STATUS_ERROR, detail=str(e))

        if response.status_code == 404:
            logger.info("Word '%s' not found in WordsAPI", word)
            return LookupResult(word=word, status=STATUS_NOT_FOUND, detail="404")

        if not 200 <= response.status_code < 300:
            logger.warning(
                "API request failed for '%s': %s", word, response.status_code
            )
            return LookupResult(
                word=word, status=STATUS_ERROR, detail=str(response.status_code)
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Malformed JSON for '%s': %s", word, e)
            return LookupResult(word=word, status=STATUS_ERROR, detail="malformed JSON")

        if not isinstance(payload, dict):
            logger.warning("Unexpected payload type for '%s': %s", word, type(payload))
            return LookupResult(word=word, status=STATUS_ERROR, detail="unexpected payload")

        try:
            info = LexicalInfo.model_validate(payload)
        except ValidationError as e:
            logger.warning("Could not parse word info for '%s': %s", word, e)
            return LookupResult(word=word, status=STATUS_ERROR, detail="invalid payload")

        if not info.word:
            info.word = word

        logger.debug(
            "Parsed '%s': %d definitions, %d examples",
            word,
            len(info.definitions),
            len(info.examples),
        )
        return LookupResult(word=word, status=STATUS_FOUND, info=info)

    def fetch_one(self, word: str) -> Optional[LexicalInfo]:
        return self.lookup(word).info

    def fetch_many(self, words: Iterable[str]) -> EnrichmentResult:
        """
        Look up each distinct word in input order, one request at a time.
        The result has one key per distinct word; failed lookups map to None.
        """
        unique_words = list(dict.fromkeys(words))
        total = len(unique_words)
        logger.info("Starting batch fetch for %d words", total)

        results: EnrichmentResult = {}
        tally = {STATUS_FOUND: 0, STATUS_NOT_FOUND: 0, STATUS_ERROR: 0}

        for i, word in enumerate(unique_words):
            logger.info("Processing word %d/%d: %s", i + 1, total, word)
            outcome = self.lookup(word)
            results[word] = outcome.info
            tally[outcome.status] += 1

            if i < total - 1 and self.request_delay > 0:
                self._sleep(self.request_delay)

        logger.info(
            "Batch fetch completed. Found: %d/%d (not found: %d, errors: %d)",
            tally[STATUS_FOUND],
            total,
            tally[STATUS_NOT_FOUND],
            tally[STATUS_ERROR],
        )
        return results
