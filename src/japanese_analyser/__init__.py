"""
Japanese Analyser - разбор вывода морфологического анализатора MeCab

Этот модуль предоставляет инструменты для:
- Запуска MeCab на текстовом файле
- Построения структуры Text → Sentence → Word
- Поиска и фильтрации предложений по слову
- Восстановления текста из поверхностных форм
- Экспорта результатов в Excel / CSV / JSON
"""

__version__ = "0.1.0"
__author__ = "Sergey"

from .errors import (
    JapaneseAnalyserError,
    InvalidFilePath,
    InvalidAnalyzerPath,
    MalformedRecord,
    AnalyzerExecutionError,
    InvalidAnalyzerConfig,
)
from .text_structure import Word, Sentence, Text
from .text_parser import JapaneseTextParser, parse, parse_output
from . import cli

__all__ = [
    "JapaneseAnalyserError",
    "InvalidFilePath",
    "InvalidAnalyzerPath",
    "MalformedRecord",
    "AnalyzerExecutionError",
    "InvalidAnalyzerConfig",
    "Word",
    "Sentence",
    "Text",
    "JapaneseTextParser",
    "parse",
    "parse_output",
    "cli",
]
