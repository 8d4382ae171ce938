"""A price list kept in a separately chained hash table."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_MASK = (1 << 64) - 1
DEFAULT_SIZE = 10


def string_hash(key: str) -> int:
    """Return the 64-bit polynomial hash (base 31) of the UTF-8 bytes of *key*."""
    value = 0
    for byte in key.encode("utf-8"):
        unit = byte - 256 if byte >= 0x80 else byte
        value = (value * 31 + unit) & _MASK
    return value


class HashTable:
    """Maps item names to prices using chaining over a fixed number of buckets."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("table size must be positive")
        self._buckets: list[list[list]] = [[] for _ in range(size)]
        self._count = 0

    def _bucket(self, key: str) -> list[list]:
        return self._buckets[string_hash(key) % len(self._buckets)]

    def insert(self, key: str, value: float) -> None:
        """Add *key* with *value*, or replace the value of an existing key."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry[0] == key:
                entry[1] = float(value)
                return
        bucket.append([key, float(value)])
        self._count += 1

    def remove(self, key: str) -> bool:
        """Delete *key*; return True if it was present."""
        bucket = self._bucket(key)
        for position, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[position]
                self._count -= 1
                return True
        return False

    def find(self, key: str) -> float | None:
        """Return the value stored for *key*, or None if it is absent."""
        for stored_key, value in self._bucket(key):
            if stored_key == key:
                return value
        return None

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and any(
            stored_key == key for stored_key, _ in self._bucket(key)
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a small price list, look up, remove and report its size."""
    table = HashTable()
    table.insert("Гвозди", 27)
    table.insert("Шурупы", 30)
    table.insert("Молток", 700)
    table.insert("Белая краска", 350)

    price = table.find("Гвозди")
    if price is not None:
        print(f"Цена гвоздей: {price:g} руб.")
    else:
        print("Товар не найден")

    if table.remove("Белая краска"):
        print("Краска удалена из прайса")

    print(f"Всего товаров в прайсе: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())