import io
import sys

import pytest

from hashlabs.voting import VotingSystem, main, surname_hash


def test_hash_of_empty_string_is_zero():
    assert surname_hash("") == 0


def test_hash_of_single_letter_is_its_code():
    assert surname_hash("a") == 97
    assert surname_hash("A") == 97


def test_hash_ignores_ascii_case():
    assert surname_hash("Ivanov") == surname_hash("iVANOV")


def test_hash_fits_in_64_bits():
    value = surname_hash("Petrovich" * 200)
    assert 0 <= value < 2**64


def test_unenrolled_detects_case_insensitive_duplicates(capsys):
    system = VotingSystem()
    assert system.unenrolled("Smith") is True
    assert system.unenrolled("SMITH") is False
    assert system.voted_count == 1
    assert system.duplicate_count == 1
    out = capsys.readouterr().out
    assert "Добавлен: Smith" in out
    assert "Дубликат: SMITH" in out


def test_cyrillic_case_is_not_folded():
    system = VotingSystem()
    system.unenrolled("Иванов")
    system.unenrolled("иванов")
    assert system.voted_count == 2
    assert system.duplicate_count == 0


def test_empty_surname_is_ignored():
    system = VotingSystem()
    assert system.unenrolled("") is False
    assert system.voted_count == 0
    assert system.duplicate_count == 0


def test_enrolled_reads_file_and_skips_blank_lines(tmp_path):
    path = tmp_path / "students.txt"
    path.write_text("Ivanov\n\nPetrov\nivanov\nSidorov\n", encoding="utf-8")
    system = VotingSystem()
    system.enrolled(path)
    assert system.surnames == ("Ivanov", "Petrov", "Sidorov")
    assert system.duplicate_count == 1


def test_enrolled_missing_file_raises(tmp_path):
    system = VotingSystem()
    with pytest.raises(FileNotFoundError):
        system.enrolled(tmp_path / "absent.txt")


def test_print_results_lists_surnames(capsys):
    system = VotingSystem()
    system.unenrolled("Brown")
    system.unenrolled("Green")
    system.unenrolled("brown")
    capsys.readouterr()
    system.print_results()
    out = capsys.readouterr().out
    assert "Результаты голосования:" in out
    assert "Количество дубликатов: 2" in out
    assert "Количество голосующих: 1" in out
    assert out.rstrip().splitlines()[-2:] == ["- Brown", "- Green"]


def test_main_reads_file_and_stdin(tmp_path, monkeypatch, capsys):
    (tmp_path / "students.txt").write_text("Ivanov\nIvanov\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("Petrov\n\nIVANOV\nend\nIgnored\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Прочитано фамилий: 1" in out
    assert "Найдено дубликатов: 1" in out
    assert "Пустая строка игнорируется" in out
    assert "- Petrov" in out
    assert "Ignored" not in out


def test_main_missing_file_reports_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Ошибка открытия файла: students.txt" in captured.err
    assert "Прочитано фамилий: 0" in captured.out