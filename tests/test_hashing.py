import io

import pytest

from dsadrills.hashing import frequency_table, main


def test_frequency_table_counts_worked_example():
    assert frequency_table([1, 2, 1, 3, 2]) == {1: 2, 2: 2, 3: 1}


def test_frequency_table_keys_are_sorted():
    table = frequency_table([9, -4, 7, 9, 0, -4, 3])
    assert list(table) == sorted(table)


def test_frequency_table_total_matches_input_length():
    values = [5, 5, 5, 1, 8, 1, 2]
    table = frequency_table(values)
    assert sum(table.values()) == len(values)
    assert set(table) == set(values)


def test_frequency_table_empty():
    assert frequency_table([]) == {}


def test_frequency_table_characters():
    table = frequency_table("banana")
    assert list(table) == ["a", "b", "n"]
    assert table["a"] == "banana".count("a")


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_main_prints_table_and_answers_queries(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "5\n1 2 1 3 2\n3\n1 3 4\n")
    assert code == 0
    assert out.splitlines() == ["1->2", "2->2", "3->1", "2", "1", "0"]


def test_main_with_no_queries(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "2\n7 7\n0\n")
    assert code == 0
    assert out.splitlines() == ["7->2"]


def test_main_rejects_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 2\n"))
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2