import io

import pytest

from vacinafila.reverse import main, reverse_word


def test_reverse_simple():
    assert reverse_word("abc") == "cba"


def test_reverse_empty():
    assert reverse_word("") == ""


@pytest.mark.parametrize("word", ["roma", "vacina", "x", "ab ba"])
def test_reverse_is_involution(word):
    assert reverse_word(reverse_word(word)) == word
    assert len(reverse_word(word)) == len(word)


def test_palindrome_unchanged():
    assert reverse_word("arara") == "arara"


def test_main_with_argument(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "Palavra ao contrario: cba\n"


def test_main_reads_first_token(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc def\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Insira a palavra: ")
    assert out.endswith("Palavra ao contrario: cba\n")