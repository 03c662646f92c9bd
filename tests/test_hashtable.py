import pytest

from dsalgo.hashtable import HashTable, main

NUMBERS = [(1, "um"), (2, "dois"), (3, "três"), (4, "quatro")]


def _filled(pairs, size=4):
    table = HashTable(size)
    for key, value in pairs:
        table.put(key, value)
    return table


def test_put_then_get_round_trip():
    table = _filled(NUMBERS)
    assert [(key, table.get(key)) for key, _ in NUMBERS] == NUMBERS
    assert len(table) == len(NUMBERS)


def test_get_missing_key_raises():
    with pytest.raises(KeyError):
        _filled(NUMBERS[:1]).get(5)


def test_remove_deletes_entry():
    table = _filled(NUMBERS[:3])
    table.remove(2)
    assert len(table) == 2
    with pytest.raises(KeyError):
        table.get(2)
    assert table.get(3) == "três"


def test_remove_missing_key_raises():
    with pytest.raises(KeyError):
        HashTable(2).remove(7)


def test_load_factor_before_and_after_removal():
    table = _filled(NUMBERS)
    assert table.load_factor() == 1.0
    table.remove(2)
    assert table.load_factor() == 0.75


def test_growth_keeps_every_entry():
    pairs = [(key, f"v{key}") for key in range(100)]
    table = _filled(pairs, size=2)
    assert len(table) == 100
    assert [(key, table.get(key)) for key, _ in pairs] == pairs
    assert table.load_factor() < 1


def test_duplicate_key_returns_first_value():
    table = _filled([(3, "first"), (3, "second")])
    assert table.get(3) == "first"
    table.remove(3)
    assert table.get(3) == "second"


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        HashTable(size)


def test_main_demonstration(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    expected_lines = [
        "Key: 1, Value: um",
        "Elemento com chave 2 removido.",
        "Busca após remoção: The table does not contain the specified key!",
        "Tamanho atual da tabela: 3",
        "Load factor: 0.75",
    ]
    assert [line for line in expected_lines if line not in out] == []