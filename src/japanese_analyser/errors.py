"""
Исключения Japanese Analyser.

Все ошибки наследуются от JapaneseAnalyserError, чтобы вызывающий код
мог перехватить их одним except.
"""

from typing import Any, Dict, Optional


class JapaneseAnalyserError(Exception):
    """Базовое исключение пакета."""
    pass


class InvalidFilePath(JapaneseAnalyserError):
    """Исходный файл не задан или не существует."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"Исходный файл не найден: {file_path!r}")


class InvalidAnalyzerPath(JapaneseAnalyserError):
    """Исполняемый файл MeCab не найден по указанному пути."""

    def __init__(self, analyzer_path: str):
        self.analyzer_path = analyzer_path
        super().__init__(f"Исполняемый файл MeCab не найден: {analyzer_path!r}")


class MalformedRecord(JapaneseAnalyserError):
    """Строка вывода анализатора содержит меньше полей, чем требует схема."""

    def __init__(self, line: str, field_count: int, expected: int):
        self.line = line
        self.field_count = field_count
        self.expected = expected
        super().__init__(
            f"Некорректная запись анализатора: ожидалось {expected} полей, "
            f"получено {field_count}: {line!r}"
        )


class AnalyzerExecutionError(JapaneseAnalyserError):
    """MeCab завершился с ошибкой, превысил таймаут или выдал нечитаемый вывод."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class InvalidAnalyzerConfig(JapaneseAnalyserError, ValueError):
    """Тип анализатора в конфигурации отсутствует или не поддерживается."""

    def __init__(self, model_cfg: Dict[str, Any]):
        self.model_cfg = model_cfg
        super().__init__(f"Некорректная конфигурация анализатора: {model_cfg!r}")
