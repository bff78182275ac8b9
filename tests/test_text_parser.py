"""
Тесты для JapaneseTextParser и функции parse()
"""

from typing import Any, Dict
from unittest.mock import Mock, patch

import pytest

from japanese_analyser import parse, parse_output
from japanese_analyser.errors import InvalidAnalyzerPath, InvalidFilePath, MalformedRecord
from japanese_analyser.models.base_model import AnalyzerOutput, BaseAnalyzerModel
from japanese_analyser.models.mecab_model import MecabModel
from japanese_analyser.text_parser import JapaneseTextParser


class FakeAnalyzer(BaseAnalyzerModel):
    """Анализатор, возвращающий заранее заданный вывод."""

    def __init__(self, output: str) -> None:
        self.output = output
        self.calls = []

    def load(self) -> None:
        pass

    def analyze_file(self, file_path: str) -> AnalyzerOutput:
        self.calls.append(file_path)
        return AnalyzerOutput(text=self.output, processing_time_ms=1.0,
                              model_name="fake", model_type="fake")

    def get_model_info(self) -> Dict[str, Any]:
        return {"name": "fake", "type": "fake"}


class TestJapaneseTextParser:
    def test_default_model_from_config(self):
        parser = JapaneseTextParser()
        assert isinstance(parser.model, MecabModel)

    def test_parse_builds_text(self, sample_outputs, source_file):
        analyzer = FakeAnalyzer(sample_outputs["multi"])
        text = JapaneseTextParser(model=analyzer).parse(str(source_file))

        assert analyzer.calls == [str(source_file)]
        assert len(text) == 3
        assert text.to_surface() == "翻訳は難しい。でも楽しい。猫が魚を食べました。"

    def test_parse_output(self, sample_outputs):
        parser = JapaneseTextParser(model=FakeAnalyzer(""))
        text = parser.parse_output(sample_outputs["single"])

        assert len(text) == 1
        assert text.sentences[0].words[0].surface == "翻訳"

    def test_malformed_output(self, sample_outputs, source_file):
        parser = JapaneseTextParser(model=FakeAnalyzer(sample_outputs["malformed"]))

        with pytest.raises(MalformedRecord):
            parser.parse(str(source_file))

    def test_analyzer_path_override(self, sample_outputs, source_file, tmp_path):
        """Явный путь к MeCab заменяет путь из конфигурации."""
        mecab = tmp_path / "custom-mecab"
        mecab.write_text("", encoding="utf-8")
        completed = Mock(returncode=0, stdout=sample_outputs["single"].encode("utf-8"), stderr=b"")

        with patch("subprocess.run", return_value=completed) as run:
            text = JapaneseTextParser(model=FakeAnalyzer("")).parse(
                str(source_file), analyzer_path=str(mecab)
            )

        assert run.call_args[0][0] == [str(mecab), str(source_file)]
        assert text.to_surface() == "翻訳"

    def test_analyzer_path_override_keeps_model_settings(self, sample_outputs, source_file, tmp_path):
        """Другой путь к MeCab не сбрасывает таймаут и кодировку модели."""
        default_mecab = tmp_path / "mecab"
        default_mecab.write_text("", encoding="utf-8")
        custom_mecab = tmp_path / "custom-mecab"
        custom_mecab.write_text("", encoding="utf-8")
        completed = Mock(returncode=0, stdout=sample_outputs["single"].encode("euc-jp"), stderr=b"")
        parser = JapaneseTextParser(model=MecabModel(path=str(default_mecab), encoding="euc-jp", timeout=5))

        with patch("subprocess.run", return_value=completed) as run:
            text = parser.parse(str(source_file), analyzer_path=str(custom_mecab))

        assert run.call_args[0][0] == [str(custom_mecab), str(source_file)]
        assert run.call_args[1]["timeout"] == 5
        assert text.to_surface() == "翻訳"
        assert parser.model.path == str(default_mecab)

    def test_analyzer_path_override_missing(self, source_file):
        parser = JapaneseTextParser(model=FakeAnalyzer(""))

        with pytest.raises(InvalidAnalyzerPath):
            parser.parse(str(source_file), analyzer_path="/nonexistent/bin/mecab")


def test_parse_missing_file_invokes_no_subprocess():
    """parse() для несуществующего файла падает до запуска процесса."""
    with patch("subprocess.run") as run:
        with pytest.raises(InvalidFilePath):
            parse("/nonexistent/path.txt")
    run.assert_not_called()


def test_parse_empty_path():
    with pytest.raises(InvalidFilePath):
        parse("")


def test_module_parse_output(sample_outputs):
    text = parse_output(sample_outputs["consecutive_eos"])
    assert len(text) == 2
