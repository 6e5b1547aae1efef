import pytest

from wordhunter.cli import main


def _write_words(tmp_path, words) -> str:
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words))
    return str(path)


def test_default_board(tmp_path, capsys):
    dict_path = _write_words(tmp_path, ["peace", "pace", "alpha"])
    code = main(["--dictionary", dict_path, "--min-length", "4", "--max-results", "0"])
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["PEACE", "PACE", "score: 3"]


def test_custom_board_and_find(tmp_path, capsys):
    dict_path = _write_words(tmp_path, ["cat", "cats", "act", "dog"])
    code = main([
        "--dictionary", dict_path, "--min-length", "3",
        "--find", "cats", "--find", "DOG",
        "C", "A", "T", "S",
    ])
    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["CATS", "ACT", "CAT"]
    assert "score: 4" in out
    assert "CATS: 0 1 2 3" in out
    assert "DOG: not on board" in out


def test_max_results_caps_listing_not_score(tmp_path, capsys):
    dict_path = _write_words(tmp_path, ["cat", "cats", "act"])
    main(["--dictionary", dict_path, "--min-length", "3", "--max-results", "1", "C", "A", "T", "S"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["CATS", "score: 4"]


def test_missing_dictionary_exits_nonzero(tmp_path, capsys):
    code = main(["--dictionary", str(tmp_path / "missing.txt")])
    assert code == 1
    assert capsys.readouterr().out == ""


def test_bad_board_shape_exits_nonzero(tmp_path):
    dict_path = _write_words(tmp_path, ["cat"])
    assert main(["--dictionary", dict_path, "A", "B", "C"]) == 1


def test_invalid_min_length_rejected(tmp_path):
    dict_path = _write_words(tmp_path, ["cat"])
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", dict_path, "--min-length", "0"])
    assert exc.value.code == 2
