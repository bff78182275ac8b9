"""
Абстрактные интерфейсы для компонентов разбора вывода MeCab.

Определяет контракты, которые должны реализовывать все компоненты,
обеспечивая единообразный API и возможность замены реализаций.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..text_structure import Text, Word


class RecordParserInterface(ABC):
    """Интерфейс для разбора одной строки вывода анализатора."""

    @abstractmethod
    def parse_line(self, line: str) -> Word:
        """Разбирает строку токена в запись слова."""
        pass

    @abstractmethod
    def split_fields(self, line: str) -> list:
        """Разбивает строку на позиционные поля."""
        pass


class SegmenterInterface(ABC):
    """Интерфейс для разбиения вывода анализатора на предложения."""

    @abstractmethod
    def segment(self, output: str) -> Text:
        """Строит Text из полного вывода анализатора."""
        pass


class ResultExporterInterface(ABC):
    """Интерфейс для экспорта разобранного текста."""

    @abstractmethod
    def export_to_excel(self, text: Text, filepath: Union[str, Path]) -> Path:
        """Экспортирует текст в Excel формат."""
        pass

    @abstractmethod
    def export_to_csv(self, text: Text, filepath: Union[str, Path]) -> Path:
        """Экспортирует слова текста в CSV."""
        pass

    @abstractmethod
    def export_to_json(self, text: Text, filepath: Union[str, Path]) -> Path:
        """Экспортирует текст в JSON формат."""
        pass


class TextParser(ABC):
    """Основной интерфейс разбора файла в Text."""

    @abstractmethod
    def parse(self, file_path: str, analyzer_path: str = None) -> Text:
        """Запускает анализатор на файле и возвращает разобранный текст."""
        pass

    @abstractmethod
    def parse_output(self, output: str) -> Text:
        """Строит Text из уже полученного вывода анализатора."""
        pass
