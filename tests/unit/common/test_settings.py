from pathlib import Path

import pytest

from common.settings import Settings

ENV_VARS = [
    "WORDS_API_KEY",
    "WORDS_API_HOST",
    "WORDS_API_BASE_URL",
    "WORDS_API_DELAY",
    "WORDS_API_TIMEOUT",
    "CEFR_DATA_PATH",
    "CEFR_OUTPUT_PATH",
    "CEFR_SAMPLE_SIZE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(load_env_file=False)

    assert settings.data_path == Path("data/cefr_dataset.csv")
    assert settings.output_path == Path("output/output.json")
    assert settings.sample_size == 10
    assert settings.words_api_host == "wordsapiv1.p.rapidapi.com"
    assert settings.words_api_base_url == "https://wordsapiv1.p.rapidapi.com/words/"
    assert settings.request_delay == 0.1
    assert settings.has_api_key is False


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("WORDS_API_KEY", "abc123")
    monkeypatch.setenv("CEFR_SAMPLE_SIZE", "4")
    monkeypatch.setenv("WORDS_API_DELAY", "0.5")
    monkeypatch.setenv("CEFR_OUTPUT_PATH", "/tmp/out.json")

    settings = Settings.from_env(load_env_file=False)

    assert settings.has_api_key is True
    assert settings.words_api_key.get_secret_value() == "abc123"
    assert settings.sample_size == 4
    assert settings.request_delay == 0.5
    assert settings.output_path == Path("/tmp/out.json")


def test_api_key_is_hidden_in_repr(monkeypatch):
    monkeypatch.setenv("WORDS_API_KEY", "abc123")

    settings = Settings.from_env(load_env_file=False)

    assert "abc123" not in repr(settings)
    assert "abc123" not in settings.model_dump_json()


def test_empty_api_key_means_no_key(monkeypatch):
    monkeypatch.setenv("WORDS_API_KEY", "")

    assert Settings.from_env(load_env_file=False).has_api_key is False
