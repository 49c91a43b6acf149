import pytest

from dictionary_catalog import DictionaryCatalog, parse_records
from errors import InvalidWord, SinkUnavailable, SourceUnavailable, WordDuplicated


@pytest.fixture
def catalog():
    catalog = DictionaryCatalog()
    catalog.add_word("cat", "a feline")
    catalog.add_word("dog", "a canine")
    catalog.find_word("cat").search_count = 2
    catalog.find_word("dog").search_count = 5
    return catalog


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_export_format_is_exact(catalog, tmp_path):
    target = tmp_path / "out.txt"

    result = catalog.export_to_file(str(target))

    assert result.ok
    assert result.value == 2
    assert target.read_bytes() == b"dog\n5\na canine\n\ncat\n2\na feline"


def test_export_ties_sorted_alphabetically(tmp_path):
    catalog = DictionaryCatalog()
    for name in ["pear", "apple", "fig"]:
        catalog.add_word(name, name.upper())

    assert catalog.export_lines() == [
        "apple", "0", "APPLE", "",
        "fig", "0", "FIG", "",
        "pear", "0", "PEAR",
    ]


def test_export_empty_catalog_writes_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    assert DictionaryCatalog().export_to_file(str(target)).ok
    assert target.read_text(encoding="utf-8") == ""


def test_export_to_unwritable_path(catalog, tmp_path):
    result = catalog.export_to_file(str(tmp_path))

    assert isinstance(result.error, SinkUnavailable)
    assert result.error.path == str(tmp_path)
    assert isinstance(result.error.reason, OSError)


def test_export_does_not_change_frequencies(catalog, tmp_path):
    catalog.export_to_file(str(tmp_path / "out.txt"))
    assert catalog.find_word("dog").search_count == 5


def test_import_replaces_catalog(catalog, tmp_path):
    path = _write(tmp_path / "in.txt", "bat\nflying mammal\n\nowl\nnight bird\n")

    result = catalog.import_from_file(path)

    assert result.ok
    assert result.value == 2
    assert len(catalog) == 2
    assert catalog.find_word("cat") is None
    assert catalog.find_word("owl").meaning == "night bird"
    assert catalog.find_word("owl").search_count == 0


def test_import_without_trailing_separator(tmp_path):
    catalog = DictionaryCatalog()
    path = _write(tmp_path / "in.txt", "bat\nflying mammal\n\nowl\nnight bird")

    assert catalog.import_from_file(path).value == 2


def test_import_ignores_incomplete_last_record(tmp_path):
    catalog = DictionaryCatalog()
    path = _write(tmp_path / "in.txt", "bat\nflying mammal\n\nowl")

    result = catalog.import_from_file(path)

    assert result.value == 1
    assert "owl" not in catalog


def test_import_numeric_meaning_in_two_line_record(tmp_path):
    catalog = DictionaryCatalog()
    path = _write(tmp_path / "in.txt", "year\n2025\n\nday\nsunlight\n")

    catalog.import_from_file(path)

    assert catalog.find_word("year").meaning == "2025"
    assert catalog.find_word("day").meaning == "sunlight"


def test_import_empty_file(catalog, tmp_path):
    path = _write(tmp_path / "in.txt", "")

    result = catalog.import_from_file(path)

    assert result.ok
    assert result.value == 0
    assert len(catalog) == 0


def test_import_duplicate_aborts_with_partial_state(catalog, tmp_path):
    path = _write(tmp_path / "in.txt", "bat\nfirst\n\nbat\nsecond\n\nowl\nnight bird\n")

    result = catalog.import_from_file(path)

    assert isinstance(result.error, WordDuplicated)
    assert catalog.find_word("bat").meaning == "first"
    assert "owl" not in catalog
    assert "cat" not in catalog


def test_import_invalid_word_aborts(tmp_path):
    catalog = DictionaryCatalog()
    path = _write(tmp_path / "in.txt", "bat\nflying mammal\n\nbad word\nnope\n")

    result = catalog.import_from_file(path)

    assert isinstance(result.error, InvalidWord)
    assert result.error.word == "bad word"
    assert len(catalog) == 1


def test_import_missing_file_clears_catalog(catalog, tmp_path):
    missing = str(tmp_path / "missing.txt")

    result = catalog.import_from_file(missing)

    assert isinstance(result.error, SourceUnavailable)
    assert result.error.path == missing
    assert len(catalog) == 0


def test_import_undecodable_file(tmp_path):
    target = tmp_path / "in.txt"
    target.write_bytes(b"cat\n\xff\xfe\xfa\n")

    result = DictionaryCatalog().import_from_file(str(target))

    assert isinstance(result.error, SourceUnavailable)


def test_import_lines_accepts_plain_strings(catalog):
    result = catalog.import_lines(["bat", "flying mammal", "", "owl", "night bird"])

    assert result.value == 2
    assert "cat" not in catalog


def test_export_then_import_round_trip(catalog, tmp_path):
    catalog.add_word("bat", "flying mammal")
    catalog.add_word("eel", "")
    catalog.find_word_by_freq("a")
    original = {entry.name: entry.meaning for entry in catalog.entries()}
    target = str(tmp_path / "round.txt")

    assert catalog.export_to_file(target).ok
    restored = DictionaryCatalog()
    result = restored.import_from_file(target)

    assert result.ok
    assert {entry.name: entry.meaning for entry in restored.entries()} == original
    assert all(entry.search_count == 0 for entry in restored.entries())


def test_parse_records_strips_line_endings():
    records = list(parse_records(["cat\r\n", "a feline\r\n", "\r\n", "dog\n", "a canine\n"]))
    assert records == [("cat", "a feline"), ("dog", "a canine")]


def test_parse_records_export_form():
    lines = "dog\n5\na canine\n\ncat\n2\na feline".split("\n")
    assert list(parse_records(lines)) == [("dog", "a canine"), ("cat", "a feline")]


def test_empty_meaning_survives_export_then_import(tmp_path):
    catalog = DictionaryCatalog()
    catalog.add_word("cat", "")
    catalog.add_word("dog", "a canine")
    catalog.find_word("cat").search_count = 7
    target = str(tmp_path / "empty_meaning.txt")

    assert catalog.export_to_file(target).ok
    restored = DictionaryCatalog()
    result = restored.import_from_file(target)

    assert result.ok
    assert len(restored) == 2
    assert restored.find_word("cat").meaning == ""
    assert restored.find_word("dog").meaning == "a canine"


def test_empty_meaning_as_last_exported_record(tmp_path):
    catalog = DictionaryCatalog()
    catalog.add_word("dog", "a canine")
    catalog.add_word("cat", "")
    catalog.find_word("dog").search_count = 3
    target = str(tmp_path / "last_empty.txt")

    assert catalog.export_to_file(target).ok
    restored = DictionaryCatalog()

    assert restored.import_from_file(target).ok
    assert [(entry.name, entry.meaning) for entry in restored.entries()] == [
        ("cat", ""), ("dog", "a canine")]


def test_parse_records_whitespace_only_separator_is_blank():
    records = list(parse_records(["year", "2025", " ", "day", "sunlight"]))
    assert records == [("year", "2025"), ("day", "sunlight")]
