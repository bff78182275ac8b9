import stat
import sys
from pathlib import Path
from typing import Callable

import pytest

# В тестах явно добавляем путь к src, чтобы импортировать пакет без установки
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from japanese_analyser.text_parser import parse_output  # noqa: E402
from japanese_analyser.text_structure import Text  # noqa: E402


@pytest.fixture
def temp_directory(tmp_path: Path) -> Path:
    """Временная директория для тестов.

    Возвращает уникальную директорию для каждого теста.
    """
    return tmp_path


@pytest.fixture(scope="session")
def sample_outputs():
    """Образцы вывода MeCab для тестирования."""
    from .fixtures import sample_outputs as samples

    return {
        "single": samples.SINGLE_WORD_OUTPUT,
        "multi": samples.MULTI_SENTENCE_OUTPUT,
        "consecutive_eos": samples.CONSECUTIVE_EOS_OUTPUT,
        "no_trailing_eos": samples.NO_TRAILING_EOS_OUTPUT,
        "malformed": samples.MALFORMED_OUTPUT,
    }


@pytest.fixture
def multi_text(sample_outputs) -> Text:
    """Разобранный текст из трёх предложений."""
    return parse_output(sample_outputs["multi"])


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Исходный текстовый файл (содержимое не важно для поддельного MeCab)."""
    path = tmp_path / "source.txt"
    path.write_text("翻訳は難しい。\nでも楽しい。\n猫が魚を食べました。\n", encoding="utf-8")
    return path


@pytest.fixture
def fake_mecab(tmp_path: Path) -> Callable[..., Path]:
    """Создаёт исполняемый скрипт, имитирующий MeCab.

    Скрипт проверяет, что ему передан существующий файл, и печатает
    заранее заданный вывод.
    """
    if sys.platform.startswith("win"):
        pytest.skip("поддельный MeCab реализован как shell-скрипт")

    def _make(output: str, exit_code: int = 0, name: str = "mecab") -> Path:
        output_file = tmp_path / f"{name}.out"
        output_file.write_text(output, encoding="utf-8")
        script = tmp_path / name
        script.write_text(
            "#!/bin/sh\n"
            '[ -f "$1" ] || { echo "no input file" >&2; exit 2; }\n'
            f'cat "{output_file}"\n'
            f"exit {exit_code}\n",
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make


def pytest_configure(config):
    """Регистрируем маркеры для проекта."""
    config.addinivalue_line("markers", "integration: интеграционные тесты")
