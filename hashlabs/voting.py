"""Registration of voters by surname with duplicate detection."""

from __future__ import annotations

import sys
from collections.abc import Sequence

_MASK = (1 << 64) - 1
_PRIME = 31
DEFAULT_STUDENTS_FILE = "students.txt"


def _folded_units(text: str):
    """Yield the UTF-8 bytes of *text* as signed char values, ASCII lower-cased."""
    for byte in text.encode("utf-8"):
        if byte >= 0x80:
            yield byte - 256
        elif 0x41 <= byte <= 0x5A:
            yield byte + 0x20
        else:
            yield byte


def surname_hash(surname: str) -> int:
    """Return the 64-bit case-insensitive polynomial hash of a surname."""
    value = 0
    for unit in _folded_units(surname):
        value = (value * _PRIME + unit) & _MASK
    return value


class VotingSystem:
    """Keeps the surnames of voters and counts repeated attempts to vote."""

    def __init__(self) -> None:
        self._hashes: set[int] = set()
        self._surnames: list[str] = []
        self._duplicates = 0

    @property
    def voted_count(self) -> int:
        """Number of distinct voters registered."""
        return len(self._surnames)

    @property
    def duplicate_count(self) -> int:
        """Number of rejected repeat registrations."""
        return self._duplicates

    @property
    def surnames(self) -> tuple[str, ...]:
        """Registered surnames in the order they were added."""
        return tuple(self._surnames)

    def _register(self, surname: str) -> bool:
        key = surname_hash(surname)
        if key in self._hashes:
            self._duplicates += 1
            print(f"Дубликат: {surname}")
            return False
        self._hashes.add(key)
        self._surnames.append(surname)
        print(f"Добавлен: {surname}")
        return True

    def enrolled(self, file_path) -> None:
        """Register every non-empty line of a file as a surname.

        Raises OSError if the file cannot be opened.
        """
        with open(file_path, encoding="utf-8") as handle:
            for line in handle:
                surname = line.rstrip("\n")
                if surname:
                    self._register(surname)

    def unenrolled(self, surname: str) -> bool:
        """Register one surname; return True if it was new. Empty input is ignored."""
        if not surname:
            return False
        return self._register(surname)

    def print_results(self) -> None:
        """Print the summary of the vote."""
        print("\nРезультаты голосования:")
        print(f"Количество дубликатов: {self.voted_count}")
        print(f"Количество голосующих: {self._duplicates}")
        print("Фамилии голосующих:")
        for surname in self._surnames:
            print(f"- {surname}")


def main(argv: Sequence[str] | None = None) -> int:
    """Load surnames from a file, then read more from standard input until 'end'."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_STUDENTS_FILE

    system = VotingSystem()
    print(f"Чтение файла {path}...")
    try:
        system.enrolled(path)
    except OSError:
        print(f"Ошибка открытия файла: {path}", file=sys.stderr)
    print(f"Прочитано фамилий: {system.voted_count}")
    print(f"Найдено дубликатов: {system.duplicate_count}")

    while True:
        try:
            line = input("Введите фамилию (или 'end' для завершения): ")
        except EOFError:
            break
        if line == "end":
            break
        if not line:
            print("Пустая строка игнорируется")
        system.unenrolled(line)

    system.print_results()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())