import logging

import pytest

from dictionary_catalog import DictionaryCatalog, normalize_meaning
from errors import InvalidWord, OperationResult, WordDuplicated, WordNotFound
from search_history import SearchHistory
from word_entry import WordEntry


def _catalog_with(**counts):
    """Словник зі словами та заданими частотами (значення = 'meaning of <word>')."""
    catalog = DictionaryCatalog()
    for name, count in counts.items():
        assert catalog.add_word(name, f"meaning of {name}").ok
        catalog.find_word(name).search_count = count
    return catalog


@pytest.fixture
def catalog():
    return DictionaryCatalog()


def test_add_then_find(catalog):
    result = catalog.add_word("cat", "a feline")

    assert result.ok
    assert isinstance(result.value, WordEntry)
    found = catalog.find_word("cat")
    assert found.name == "cat"
    assert found.meaning == "a feline"
    assert found.search_count == 0


def test_find_word_missing_is_none_not_error(catalog):
    assert catalog.find_word("ghost") is None


def test_find_word_is_case_sensitive(catalog):
    catalog.add_word("Cat", "capitalised")
    assert catalog.find_word("cat") is None
    assert catalog.find_word("Cat").meaning == "capitalised"


def test_find_word_does_not_change_frequency(catalog):
    catalog.add_word("cat", "a feline")
    catalog.find_word("cat")
    assert catalog.find_word("cat").search_count == 0


def test_add_duplicate_keeps_first_meaning(catalog):
    catalog.add_word("cat", "a feline")

    result = catalog.add_word("cat", "something else")

    assert not result.ok
    assert isinstance(result.error, WordDuplicated)
    assert result.error.word == "cat"
    assert "cat" in result.message
    assert catalog.find_word("cat").meaning == "a feline"
    assert len(catalog) == 1


@pytest.mark.parametrize("word", ["cat1", "two words", ""])
def test_add_invalid_word_leaves_catalog_unchanged(catalog, word):
    catalog.add_word("dog", "a canine")

    result = catalog.add_word(word, "meaning")

    assert isinstance(result.error, InvalidWord)
    assert len(catalog) == 1
    assert word not in catalog


def test_failures_are_logged(catalog, caplog):
    with caplog.at_level(logging.WARNING, logger="WordDictionary"):
        catalog.remove_word("ghost")
    assert "ghost" in caplog.text


def test_find_by_freq_scenario_tie_broken_alphabetically():
    catalog = _catalog_with(cat=2, dog=5, bat=2)

    result = catalog.find_word_by_freq("a")

    assert [entry.name for entry in result] == ["bat", "cat"]
    assert catalog.find_word("bat").search_count == 3
    assert catalog.find_word("cat").search_count == 3
    assert catalog.find_word("dog").search_count == 5


def test_find_by_freq_returns_at_most_three_in_rank_order():
    catalog = _catalog_with(db=5, bb=1, ab=1, cb=1, eb=0)

    result = catalog.find_word_by_freq("b")

    assert [entry.name for entry in result] == ["db", "ab", "bb"]
    keys = [entry.sort_key() for entry in result]
    assert keys == sorted(keys)


def test_find_by_freq_increments_only_returned_entries():
    catalog = _catalog_with(apple=0, ape=0, apex=0, map=0)

    first = catalog.find_word_by_freq("ap")

    assert [entry.name for entry in first] == ["ape", "apex", "apple"]
    assert [entry.search_count for entry in first] == [1, 1, 1]
    assert catalog.find_word("map").search_count == 0


def test_find_by_freq_repeated_query_increments_by_one_each_time():
    catalog = _catalog_with(cat=2, dog=5, bat=2)

    first = {entry.name: entry.search_count for entry in catalog.find_word_by_freq("a")}
    second = {entry.name: entry.search_count for entry in catalog.find_word_by_freq("a")}

    for name in first.keys() & second.keys():
        assert second[name] == first[name] + 1


def test_find_by_freq_frequency_can_overtake_alphabetical_order():
    catalog = _catalog_with(aa=0, ab=0, ac=0, ad=0)
    catalog.find_word("ad").search_count = 1

    result = catalog.find_word_by_freq("a")

    assert [entry.name for entry in result] == ["ad", "aa", "ab"]
    assert catalog.find_word("ac").search_count == 0


def test_find_by_freq_no_match_is_empty(catalog):
    catalog.add_word("cat", "a feline")
    assert catalog.find_word_by_freq("zzz") == []
    assert catalog.find_word("cat").search_count == 0


def test_find_by_freq_is_case_sensitive(catalog):
    catalog.add_word("Cat", "capitalised")
    assert catalog.find_word_by_freq("cat") == []


def test_find_by_freq_empty_substring_matches_everything():
    catalog = _catalog_with(b=0, a=0)
    assert [entry.name for entry in catalog.find_word_by_freq("")] == ["a", "b"]


def test_modify_preserves_meaning_and_frequency():
    catalog = _catalog_with(colour=4)

    result = catalog.modify_meaning("color", "colour")

    assert result.ok
    assert "colour" not in catalog
    renamed = catalog.find_word("color")
    assert renamed.meaning == "meaning of colour"
    assert renamed.search_count == 4
    assert len(catalog) == 1


def test_modify_missing_old_word(catalog):
    result = catalog.modify_meaning("dog", "cat")
    assert isinstance(result.error, WordNotFound)
    assert result.error.word == "cat"


def test_modify_invalid_new_name_leaves_old_entry():
    catalog = _catalog_with(cat=2)

    result = catalog.modify_meaning("cat 2", "cat")

    assert isinstance(result.error, InvalidWord)
    assert catalog.find_word("cat").search_count == 2
    assert len(catalog) == 1


def test_modify_onto_existing_word_fails_without_mutation():
    catalog = _catalog_with(cat=1, dog=2)

    result = catalog.modify_meaning("dog", "cat")

    assert isinstance(result.error, WordDuplicated)
    assert result.error.word == "dog"
    assert catalog.find_word("cat").meaning == "meaning of cat"
    assert catalog.find_word("dog").meaning == "meaning of dog"


def test_modify_to_same_name_is_noop():
    catalog = _catalog_with(cat=3)

    result = catalog.modify_meaning("cat", "cat")

    assert result.ok
    assert catalog.find_word("cat").search_count == 3


def test_remove_word(catalog):
    catalog.add_word("cat", "a feline")

    result = catalog.remove_word("cat")

    assert result.ok
    assert result.value.name == "cat"
    assert catalog.find_word("cat") is None


def test_remove_missing_word_keeps_size(catalog):
    catalog.add_word("cat", "a feline")

    result = catalog.remove_word("dog")

    assert isinstance(result.error, WordNotFound)
    assert len(catalog) == 1


def test_remove_all_words():
    catalog = _catalog_with(a=0, b=0)
    assert catalog.remove_all_words().value == 2
    assert len(catalog) == 0


def test_remove_all_words_on_empty_catalog(catalog):
    result = catalog.remove_all_words()
    assert result.ok
    assert result.value == 0


def test_entries_are_rank_ordered():
    catalog = _catalog_with(cat=2, dog=5, bat=2)
    assert [entry.name for entry in catalog.entries()] == ["dog", "bat", "cat"]


def test_search_updates_history_with_match_first():
    catalog = _catalog_with(cat=0, cart=0, scat=0)
    history = SearchHistory()

    outcome = catalog.search("cat", history)

    assert outcome.match.name == "cat"
    assert [entry.name for entry in outcome.suggestions] == ["cart", "cat", "scat"]
    assert outcome.history == ["cat", "cart", "scat"]
    assert history.to_list() == outcome.history


def test_search_without_exact_match_keeps_rank_order_in_history():
    catalog = _catalog_with(cart=0, scat=5)
    history = SearchHistory()

    outcome = catalog.search("ca", history)

    assert outcome.match is None
    assert outcome.history == ["scat", "cart"]


def test_search_with_no_results_leaves_history_untouched():
    catalog = _catalog_with(cat=0)
    history = SearchHistory()
    history.push("older")

    outcome = catalog.search("zzz", history)

    assert outcome.match is None
    assert outcome.suggestions == []
    assert outcome.history == ["older"]


def test_operation_result_helpers():
    ok = OperationResult.success(3)
    failed = OperationResult.failure(WordNotFound("cat"))

    assert ok.ok and ok.value == 3 and ok.message == ""
    assert not failed.ok
    assert failed.message == "The word cat does not exist in the dictionary."


@pytest.mark.parametrize("limit", [0, 4, 5])
def test_suggestion_limit_outside_top_three_rejected(limit):
    with pytest.raises(ValueError):
        DictionaryCatalog(suggestion_limit=limit)


def test_find_by_freq_never_exceeds_three_with_many_matches():
    catalog = _catalog_with(aa=0, ab=0, ac=0, ad=0, ae=0)
    assert len(catalog.find_word_by_freq("a")) == 3


def test_normalize_meaning_flattens_line_breaks():
    assert normalize_meaning("a small\n  domestic feline\r\n\n") == "a small domestic feline"
    assert normalize_meaning("single line") == "single line"
    assert normalize_meaning("\n \n") == ""
