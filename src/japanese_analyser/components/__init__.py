"""
Компоненты для разбора вывода MeCab.

Каждый компонент отвечает за одну конкретную задачу:
- WordRecordParser - разбор строки токена в запись слова
- SentenceSegmenter - разбиение вывода на предложения
- ResultExporter - экспорт результатов
"""

from .record_parser import WordRecordParser
from .segmenter import SentenceSegmenter
from .exporter import ResultExporter

__all__ = [
    'WordRecordParser',
    'SentenceSegmenter',
    'ResultExporter',
]
