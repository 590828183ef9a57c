import pytest

from lrcwpm.core import text_utils
from lrcwpm.exceptions import ValidationError


def report_line(artist, name, average=120):
    return f"{average} WPM 0.1 rp {artist} - {name} Peaks: 200.00, 190.00, 180.00"


def test_remove_diacritics_decomposable_letters():
    assert text_utils.remove_diacritics("Beyoncé Motörhead Ñandú") == "Beyonce Motorhead Nandu"


def test_remove_diacritics_table_letters():
    assert text_utils.remove_diacritics("Mø Łódź Æther straße") == "Mo Lodz AEther strase"


def test_remove_diacritics_folds_letters_exposed_by_decomposition():
    assert text_utils.remove_diacritics("ǽ") == "ae"
    assert text_utils.remove_diacritics("Ǣ") == "AE"
    assert text_utils.remove_diacritics("Ǽ") == "AE"
    assert text_utils.remove_diacritics("Ǿ") == "O"
    assert text_utils.remove_diacritics("ǿ") == "o"


def test_normalize_name_key_keeps_decomposed_ligatures():
    line = "120 WPM 0 rp Sǿren - Ǽther Song Peaks: 1.00"
    assert text_utils.normalize_name_key(line) == "aethersongsoren"


def test_trigrams():
    assert text_utils.trigrams("abcd") == ["abc", "bcd"]
    assert text_utils.trigrams("ab") == []


def test_trigram_similarity_values():
    assert text_utils.trigram_similarity("abcdef", "abcdef") == 1.0
    assert text_utils.trigram_similarity("abcdef", "abcdeg") == pytest.approx(0.75)
    assert text_utils.trigram_similarity("night", "nacht") == 0.0
    assert text_utils.trigram_similarity("", "") == 0.0


def test_are_similar_threshold_is_inclusive():
    assert text_utils.are_similar("abcdef", "abcdeg", 0.75)
    assert not text_utils.are_similar("abcdef", "abcdeg", 0.76)


def test_normalize_name_key_strips_brackets_and_parentheses():
    plain = text_utils.normalize_name_key(report_line("Queen", "Bohemian Rhapsody"))
    tagged = text_utils.normalize_name_key(
        report_line("Queen", "Bohemian Rhapsody (Remastered)")
    )
    live = text_utils.normalize_name_key(report_line("Queen", "Bohemian Rhapsody [Live]"))
    assert plain == tagged == live == "bohemianrhapsodyqueen"


def test_normalize_name_key_cuts_credits_and_hyphens():
    line = report_line("Beyoncé feat. Jay-Z", "Crazy in Love - 2003 Mix")
    assert text_utils.normalize_name_key(line) == "crazyinlovebeyonce"


def test_normalize_name_key_folds_diacritics():
    assert text_utils.normalize_name_key(report_line("Mø", "Final Song")) == "finalsongmo"


def test_normalize_name_key_letters_only():
    line = report_line("AC/DC", "T.N.T.")
    assert text_utils.normalize_name_key(line) == "tntacdc"


def test_split_report_name():
    assert text_utils.split_report_name(report_line("Queen", "Love of My Life")) == (
        "Queen",
        "Love of My Life",
    )


def test_normalize_name_key_rejects_malformed_lines():
    with pytest.raises(ValidationError):
        text_utils.normalize_name_key("no marker in this line at all")
    with pytest.raises(ValidationError):
        text_utils.normalize_name_key("120 WPM 0.1 rp NoSeparator Peaks: 1.00")
