import pytest

import domain.vocabulary.loader as loader_module
from domain.vocabulary.errors import LoadError, NotFoundError
from domain.vocabulary.loader import load_entries
from domain.vocabulary.schema import VocabularyEntry


def _write(tmp_path, content: str, name: str = "words.csv"):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_load_entries_skips_row_without_word(tmp_path):
    path = _write(
        tmp_path,
        "word,level,pos,frequency\n"
        "apple,A1,noun,120\n"
        "run,A1,verb,300\n"
        "  ,B1,noun,5\n"
        "abandon,B2,verb,12.5\n"
        "bright,A2,adjective,\n"
        "ubiquitous,C2,adjective,1\n",
    )

    entries = load_entries(path)

    assert len(entries) == 5
    assert [e.word for e in entries] == ["apple", "run", "abandon", "bright", "ubiquitous"]
    assert entries[0] == VocabularyEntry(
        word="apple", level="A1", part_of_speech="noun", frequency=120.0
    )
    assert entries[2].frequency == 12.5
    assert entries[3].frequency is None


def test_load_entries_missing_file_raises_not_found(tmp_path):
    with pytest.raises(NotFoundError):
        load_entries(tmp_path / "missing.csv")


def test_not_found_is_a_load_error(tmp_path):
    with pytest.raises(LoadError):
        load_entries(tmp_path / "missing.csv")


def test_load_entries_defaults_missing_optional_columns(tmp_path):
    path = _write(tmp_path, "word\nhello\nworld\n")

    entries = load_entries(path)

    assert [e.word for e in entries] == ["hello", "world"]
    assert all(e.level == "" for e in entries)
    assert all(e.part_of_speech == "" for e in entries)
    assert all(e.frequency is None for e in entries)


def test_load_entries_ignores_unknown_columns_and_header_case(tmp_path):
    path = _write(
        tmp_path,
        "Word, Level ,Part_Of_Speech,Frequency,Notes\n"
        "river,A2,noun,40,flows\n",
    )

    entries = load_entries(path)

    assert entries == [
        VocabularyEntry(word="river", level="A2", part_of_speech="noun", frequency=40.0)
    ]


def test_load_entries_unparsable_frequency_is_none(tmp_path):
    path = _write(
        tmp_path,
        "word,level,pos,frequency\n"
        "cat,A1,noun,often\n"
        "dog,A1,noun,nan\n",
    )

    entries = load_entries(path)

    assert [e.frequency for e in entries] == [None, None]


def test_load_entries_tolerates_short_rows(tmp_path):
    path = _write(tmp_path, "word,level,pos,frequency\nshort\nfull,B1,noun,3\n")

    entries = load_entries(path)

    assert [e.word for e in entries] == ["short", "full"]
    assert entries[0].level == ""


def test_load_entries_strips_bom(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes("\ufeffword,level\ncafé,A1\n".encode("utf-8"))

    entries = load_entries(path)

    assert entries[0].word == "café"


def test_row_parse_error_is_skipped(tmp_path, monkeypatch):
    path = _write(
        tmp_path,
        "word,level\n"
        "good,A1\n"
        "broken,A1\n"
        "fine,A2\n",
    )
    real_parse_row = loader_module._parse_row

    def flaky_parse_row(record, columns):
        if record.get("word") == "broken":
            raise ValueError("bad row")
        return real_parse_row(record, columns)

    monkeypatch.setattr(loader_module, "_parse_row", flaky_parse_row)

    entries = load_entries(path)

    assert [e.word for e in entries] == ["good", "fine"]


def test_load_entries_without_word_column_raises_load_error(tmp_path):
    path = _write(tmp_path, "term,level\nhello,A1\n")

    with pytest.raises(LoadError):
        load_entries(path)


def test_load_entries_empty_file_raises_load_error(tmp_path):
    path = _write(tmp_path, "")

    with pytest.raises(LoadError):
        load_entries(path)


def test_load_entries_undecodable_file_raises_load_error(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes("word,level\nna\xefve,B1\n".encode("latin-1"))

    with pytest.raises(LoadError) as exc_info:
        load_entries(path)

    assert not isinstance(exc_info.value, NotFoundError)


def test_entries_are_immutable(tmp_path):
    path = _write(tmp_path, "word,level\nstone,A2\n")

    entry = load_entries(path)[0]

    with pytest.raises(Exception):
        entry.word = "rock"
