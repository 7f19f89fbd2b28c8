import pytest

from arborlab.palindrome import is_palindrome, main


@pytest.mark.parametrize("word", ["", "a", "ab", "abc", "xyz123"])
def test_mirrored_words_are_palindromes(word):
    assert is_palindrome(word + word[::-1]) is True
    assert is_palindrome(word + "q" + word[::-1]) is True


@pytest.mark.parametrize("word", ["ab", "abca", "hello"])
def test_non_palindromes(word):
    assert is_palindrome(word) is False


def test_main_true(capsys):
    assert main(["level"]) == 0
    assert capsys.readouterr().out == "True\nlevel has a length of 5\n"


def test_main_false(capsys):
    assert main(["ab"]) == 0
    assert capsys.readouterr().out == "False\nab has a length of 2\n"


@pytest.mark.parametrize("args", [[], ["a", "b"]])
def test_main_wrong_arguments(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().out == "Need exactly 2 inputs\n"