import pytest

from evt2doc.errors import InvalidField
from evt2doc.lexer import Lexer, split_pairs, split_sections


# =============================================================================
# Lexer (dokument -> blokovi)
# =============================================================================

def test_blocks_are_split_on_delimiter():
    blocks = Lexer("a: 1\n---\nb: 2\n---\nc: 3").blocks
    assert [b.text for b in blocks] == ["a: 1", "b: 2", "c: 3"]
    assert [b.number for b in blocks] == [1, 2, 3]


def test_blank_blocks_are_skipped():
    blocks = Lexer("---\n\na: 1\n---\n   \n---\nb: 2\n---\n").blocks
    assert [b.text.strip() for b in blocks] == ["a: 1", "b: 2"]
    assert [b.number for b in blocks] == [1, 2]


def test_block_line_is_first_non_blank_line():
    blocks = Lexer("a: 1\n---\n\n\nb: 2").blocks
    assert blocks[0].line == 1
    assert blocks[1].line == 5


def test_delimiter_must_be_alone_on_line():
    blocks = Lexer("title: a --- b\n  ---  \nc: 3").blocks
    assert len(blocks) == 2
    assert blocks[0].text == "title: a --- b"


def test_windows_line_endings():
    blocks = Lexer("a: 1\r\n---\r\nb: 2\r\n").blocks
    assert [b.text.strip() for b in blocks] == ["a: 1", "b: 2"]


def test_empty_document_has_no_blocks():
    assert Lexer("").blocks == []
    assert Lexer("\n---\n\n").blocks == []


# =============================================================================
# Sekcije i parovi
# =============================================================================

def test_sections_header_and_description():
    header, description = split_sections("\na: 1\nb: 2\n\nPrvi pasus.\n\nDrugi pasus.\n")
    assert header == "a: 1\nb: 2"
    assert description == "Prvi pasus.\n\nDrugi pasus."


def test_sections_without_description():
    assert split_sections("a: 1\nb: 2\n") == ("a: 1\nb: 2", None)


def test_sections_blank_line_with_spaces_separates():
    assert split_sections("a: 1\n   \nOpis") == ("a: 1", "Opis")


def test_pairs_are_trimmed():
    assert split_pairs(" title :  Naslov  \ndate: 2024-11-06 09:00") == {
        "title": "Naslov",
        "date": "2024-11-06 09:00",
    }


def test_pair_value_may_contain_colon():
    assert split_pairs("title: Rust: uvod") == {"title": "Rust: uvod"}


def test_duplicate_key_last_wins():
    assert split_pairs("title: prvi\ntitle: drugi") == {"title": "drugi"}


def test_line_without_colon_is_invalid_field():
    with pytest.raises(InvalidField) as info:
        split_pairs("title: Naslov\nnema dvotacke\nduration: 10")
    assert info.value.line == "nema dvotacke"
    assert "nema dvotacke" in str(info.value)
