import pytest

from passforge.charsets import (
    ALL_CLASSES,
    CharacterClass,
    canonical_order,
    combined_alphabet,
    parse_classes,
    select_classes,
)
from passforge.errors import UnknownCharacterClassError

def test_alphabets_are_exact():
    assert CharacterClass.UPPERCASE.alphabet == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert CharacterClass.LOWERCASE.alphabet == "abcdefghijklmnopqrstuvwxyz"
    assert CharacterClass.NUMBER.alphabet == "0123456789"
    assert CharacterClass.SYMBOL.alphabet == "!@#$%^&*()_+[]{}|;:,.<>?/~`=-"

def test_alphabets_disjoint_and_non_empty():
    seen = set()
    for cls in CharacterClass:
        chars = set(cls.alphabet)
        assert chars
        assert len(chars) == len(cls.alphabet)
        assert not (chars & seen)
        seen |= chars

def test_select_classes():
    assert select_classes() == ALL_CLASSES
    assert select_classes(upper=False, symbols=False) == {CharacterClass.LOWERCASE, CharacterClass.NUMBER}
    assert select_classes(False, False, False, False) == frozenset()

def test_parse_classes():
    assert parse_classes(["upper", "Digits", " symbols "]) == {
        CharacterClass.UPPERCASE, CharacterClass.NUMBER, CharacterClass.SYMBOL,
    }
    assert parse_classes("lower,number") == {CharacterClass.LOWERCASE, CharacterClass.NUMBER}
    assert parse_classes([CharacterClass.SYMBOL]) == {CharacterClass.SYMBOL}
    assert parse_classes("") == frozenset()

def test_parse_unknown_class():
    with pytest.raises(UnknownCharacterClassError) as exc:
        parse_classes(["upper", "kanji"])
    assert exc.value.name == "kanji"

def test_canonical_order_and_combined_alphabet():
    classes = [CharacterClass.SYMBOL, CharacterClass.NUMBER, CharacterClass.SYMBOL]
    assert canonical_order(classes) == [CharacterClass.NUMBER, CharacterClass.SYMBOL]
    assert combined_alphabet(classes) == "0123456789" + CharacterClass.SYMBOL.alphabet
