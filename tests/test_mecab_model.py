"""
Тесты для MecabModel и ModelFactory без запуска реального MeCab.
"""

import subprocess
from unittest.mock import Mock, patch

import pytest

from japanese_analyser.errors import (
    AnalyzerExecutionError,
    InvalidAnalyzerConfig,
    InvalidAnalyzerPath,
    InvalidFilePath,
    JapaneseAnalyserError,
)
from japanese_analyser.models import MecabModel, ModelFactory


@pytest.fixture
def mecab_binary(tmp_path):
    """Существующий файл на месте исполняемого MeCab (subprocess.run замокан)."""
    path = tmp_path / "mecab"
    path.write_text("", encoding="utf-8")
    return path


def _completed(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0) -> Mock:
    completed = Mock()
    completed.stdout = stdout
    completed.stderr = stderr
    completed.returncode = returncode
    return completed


def test_analyze_file_runs_mecab_with_file_argument(mecab_binary, source_file, sample_outputs):
    """MeCab запускается с единственным аргументом, путём к файлу."""
    model = MecabModel(path=str(mecab_binary), timeout=5)
    fake = _completed(stdout=sample_outputs["single"].encode("utf-8"))

    with patch("subprocess.run", return_value=fake) as run:
        output = model.analyze_file(str(source_file))

    run.assert_called_once()
    args, kwargs = run.call_args
    assert args[0] == [str(mecab_binary), str(source_file)]
    assert kwargs["timeout"] == 5
    assert output.text == sample_outputs["single"]
    assert output.model_type == "mecab"
    assert output.metadata["file_path"] == str(source_file)


def test_missing_file_fails_before_subprocess(mecab_binary):
    """Отсутствующий файл: InvalidFilePath, процесс не запускается."""
    model = MecabModel(path=str(mecab_binary))

    with patch("subprocess.run") as run:
        with pytest.raises(InvalidFilePath):
            model.analyze_file("/nonexistent/path.txt")
        with pytest.raises(InvalidFilePath):
            model.analyze_file("")

    run.assert_not_called()


def test_missing_analyzer_fails_before_subprocess(source_file):
    """Отсутствующий MeCab: InvalidAnalyzerPath, процесс не запускается."""
    model = MecabModel(path="/nonexistent/bin/mecab")

    with patch("subprocess.run") as run:
        with pytest.raises(InvalidAnalyzerPath) as exc_info:
            model.analyze_file(str(source_file))

    run.assert_not_called()
    assert exc_info.value.analyzer_path == "/nonexistent/bin/mecab"


def test_file_checked_before_analyzer():
    """При обеих ошибках сообщается об исходном файле."""
    model = MecabModel(path="/nonexistent/bin/mecab")

    with pytest.raises(InvalidFilePath):
        model.analyze_file("/nonexistent/path.txt")


def test_nonzero_exit_code(mecab_binary, source_file):
    model = MecabModel(path=str(mecab_binary))
    fake = _completed(stderr=b"param.cpp(69) [ifs] no such file or directory: /etc/mecabrc", returncode=1)

    with patch("subprocess.run", return_value=fake):
        with pytest.raises(AnalyzerExecutionError) as exc_info:
            model.analyze_file(str(source_file))

    assert exc_info.value.returncode == 1
    assert "mecabrc" in exc_info.value.stderr


def test_timeout(mecab_binary, source_file):
    model = MecabModel(path=str(mecab_binary), timeout=0.5)

    with patch("subprocess.run", side_effect=subprocess.TimeoutExpired(cmd="mecab", timeout=0.5)):
        with pytest.raises(AnalyzerExecutionError):
            model.analyze_file(str(source_file))


def test_undecodable_output(mecab_binary, source_file):
    model = MecabModel(path=str(mecab_binary), encoding="utf-8")
    fake = _completed(stdout=b"\xff\xfe\t\xff")

    with patch("subprocess.run", return_value=fake):
        with pytest.raises(AnalyzerExecutionError):
            model.analyze_file(str(source_file))


def test_custom_encoding(mecab_binary, source_file):
    model = MecabModel(path=str(mecab_binary), encoding="euc-jp")
    fake = _completed(stdout="猫\t名詞\nEOS\n".encode("euc-jp"))

    with patch("subprocess.run", return_value=fake):
        output = model.analyze_file(str(source_file))

    assert output.text == "猫\t名詞\nEOS\n"


def test_get_model_info(mecab_binary):
    info = MecabModel(path=str(mecab_binary)).get_model_info()
    assert info["type"] == "mecab"
    assert info["available"] is True
    assert MecabModel(path="/nonexistent/mecab").get_model_info()["available"] is False


class TestModelFactory:
    def test_create_mecab(self):
        model = ModelFactory.create({"type": "mecab", "path": "/opt/mecab/bin/mecab", "timeout": 3})
        assert isinstance(model, MecabModel)
        assert model.path == "/opt/mecab/bin/mecab"
        assert model.timeout == 3
        assert model.encoding == "utf-8"

    def test_create_default_path(self):
        model = ModelFactory.create({"type": "MeCab"})
        assert model.path == "/usr/local/bin/mecab"

    def test_create_unknown(self):
        assert ModelFactory.create({}) is None
        assert ModelFactory.create({"type": "sudachi"}) is None

    def test_create_or_fail(self):
        with pytest.raises(ValueError):
            ModelFactory.create_or_fail({"type": "juman"})

    def test_create_or_fail_raises_package_error(self):
        with pytest.raises(JapaneseAnalyserError) as exc_info:
            ModelFactory.create_or_fail({"type": "juman"})

        assert isinstance(exc_info.value, InvalidAnalyzerConfig)
        assert exc_info.value.model_cfg == {"type": "juman"}
