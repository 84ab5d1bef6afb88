import io

import pytest

from dsadrills.recursion import (
    count_down,
    count_up,
    fibonacci,
    is_palindrome,
    main,
    repeat_name,
    reverse_in_place,
    sum_to,
)


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_fibonacci_base_cases_return_n(n):
    assert fibonacci(n) == n


@pytest.mark.parametrize("n", range(2, 30))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_pinned_value():
    assert fibonacci(10) == 55


def test_sum_to_zero():
    assert sum_to(0) == 0


@pytest.mark.parametrize("n", range(1, 40))
def test_sum_to_step(n):
    assert sum_to(n) - sum_to(n - 1) == n


def test_sum_to_negative_raises():
    with pytest.raises(ValueError):
        sum_to(-1)


def test_repeat_name():
    assert repeat_name("Ada", 3) == ["Ada", "Ada", "Ada"]
    assert repeat_name("Ada", 0) == []


def test_count_up_and_down_mirror():
    for n in range(0, 12):
        up = count_up(n)
        assert len(up) == n
        assert count_down(n) == up[::-1]
        assert up == sorted(up)


def test_count_up_small():
    assert count_up(3) == [1, 2, 3]


@pytest.mark.parametrize("text", ["madam", "", "a", "abba", "racecar"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["ab", "abca", "madame"])
def test_not_palindromes(text):
    assert is_palindrome(text) is False


def test_reverse_in_place_twice_restores():
    items = [4, 8, 1, 9, 3]
    original = list(items)
    assert reverse_in_place(items) is None
    assert items == original[::-1]
    reverse_in_place(items)
    assert items == original


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def test_main_fibonacci(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["fibonacci"], "12\n")
    assert code == 0
    assert out == str(fibonacci(12))


def test_main_sum(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["sum"], "6\n")
    assert out == f"The sum of n number is : {sum_to(6)}"


def test_main_palindrome_default(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["palindrome"], "")
    assert out == "1"


def test_main_reverse(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["reverse"], "4\n1 2 3 4\n")
    assert out == "4 3 2 1 "


def test_main_count_down(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["count-down"], "3")
    assert out.splitlines() == ["3", "2", "1"]


def test_main_sum_negative_errors(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("-2"))
    with pytest.raises(SystemExit) as info:
        main(["sum"])
    assert info.value.code == 2