"""A separate-chaining hash table keyed by integers."""

from __future__ import annotations

import argparse
from typing import Optional

_MISSING_KEY = "The table does not contain the specified key!"
_MAX_LOAD_FACTOR = 0.75
_GROWTH = 8


class HashTable:
    """Map integer keys to strings using a list of buckets.

    Before an insertion the bucket count grows eightfold whenever the load
    factor exceeds 0.75. Inserting an existing key adds another entry; lookups
    return the earliest one.
    """

    def __init__(self, size: int = 8) -> None:
        if size <= 0:
            raise ValueError("a hash table needs at least one bucket")
        self._buckets: list[list[tuple[int, str]]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: int) -> list[tuple[int, str]]:
        return self._buckets[key % len(self._buckets)]

    def _grow(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(_GROWTH * len(old))]
        for bucket in old:
            for key, value in bucket:
                self._bucket(key).append((key, value))

    def put(self, key: int, value: str) -> None:
        """Store ``value`` under ``key``."""
        if self.load_factor() > _MAX_LOAD_FACTOR:
            self._grow()
        self._bucket(key).append((key, value))
        self._count += 1

    def get(self, key: int) -> str:
        """Return the value stored under ``key``; raise KeyError if absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        raise KeyError(key)

    def remove(self, key: int) -> None:
        """Delete one entry for ``key``; raise KeyError if absent."""
        bucket = self._bucket(key)
        for position, (stored_key, _) in enumerate(bucket):
            if stored_key == key:
                del bucket[position]
                self._count -= 1
                return
        raise KeyError(key)

    def load_factor(self) -> float:
        """Return the number of entries per bucket."""
        return self._count / len(self._buckets)

    def __len__(self) -> int:
        return self._count


def main(argv: Optional[list[str]] = None) -> int:
    """Run a short demonstration of the hash table."""
    argparse.ArgumentParser(description="Hash table demonstration.").parse_args(argv)

    table = HashTable(4)
    table.put(1, "um")
    table.put(2, "dois")
    table.put(3, "três")
    table.put(4, "quatro")

    for key in range(1, 5):
        try:
            value = table.get(key)
        except KeyError:
            print(_MISSING_KEY)
        else:
            print(f"Key: {key}, Value: {value}")

    try:
        table.remove(2)
    except KeyError:
        print("Erro ao remover:", _MISSING_KEY)
    else:
        print("Elemento com chave 2 removido.")

    try:
        table.get(2)
    except KeyError:
        print("Busca após remoção:", _MISSING_KEY)

    print("Tamanho atual da tabela:", len(table))
    print(f"Load factor: {table.load_factor():.2f}")
    return 0