import pytest

from wordhunter.errors import InvalidArgumentError, LexiconLoadError, WordHunterError
from wordhunter.lexicon import Lexicon, load_lexicon


def test_words_uppercased_sorted_and_deduped():
    lexicon = Lexicon(["cat", "Cat", "ant", "CAT"])
    assert list(lexicon) == ["ANT", "CAT"]
    assert len(lexicon) == 2


def test_contains():
    lexicon = Lexicon(["CAT", "CATS"])
    assert lexicon.contains("CAT")
    assert "CATS" in lexicon
    assert "CA" not in lexicon
    assert "DOG" not in lexicon


def test_has_prefix():
    lexicon = Lexicon(["CAT", "CATS", "DOG"])
    assert lexicon.has_prefix("C")
    assert lexicon.has_prefix("CA")
    assert lexicon.has_prefix("DO")
    assert not lexicon.has_prefix("CB")
    assert not lexicon.has_prefix("E")
    assert not lexicon.has_prefix("CATSS")


def test_word_is_its_own_prefix():
    lexicon = Lexicon(["CAT"])
    assert lexicon.has_prefix("CAT")


def test_count_prefix():
    lexicon = Lexicon(["CAR", "CARE", "CART", "CAT", "DOG"])
    assert lexicon.count_prefix("CAR") == 3
    assert lexicon.count_prefix("CA") == 4
    assert lexicon.count_prefix("") == 5
    assert lexicon.count_prefix("Z") == 0


def test_empty_lexicon():
    lexicon = Lexicon()
    assert len(lexicon) == 0
    assert not lexicon.has_prefix("")
    assert "A" not in lexicon


def test_load_lexicon(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\nDog  bird\n\n  cat\nant\n")
    lexicon = load_lexicon(str(path))
    assert list(lexicon) == ["ANT", "BIRD", "CAT", "DOG"]


def test_load_lexicon_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert len(load_lexicon(path)) == 0


def test_load_missing_file(tmp_path):
    with pytest.raises(LexiconLoadError) as exc:
        load_lexicon(tmp_path / "missing.txt")
    assert isinstance(exc.value.__cause__, OSError)
    assert isinstance(exc.value, WordHunterError)


def test_load_directory_fails(tmp_path):
    with pytest.raises(LexiconLoadError):
        load_lexicon(tmp_path)


def test_load_undecodable_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"CAT\n\xff\xfe\xfa\n")
    with pytest.raises(LexiconLoadError):
        load_lexicon(path)


def test_load_none():
    with pytest.raises(InvalidArgumentError):
        load_lexicon(None)
