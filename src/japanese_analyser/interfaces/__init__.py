"""
Интерфейсы для компонентов разбора вывода MeCab.

Определяет абстрактные базовые классы для всех компонентов,
обеспечивая единообразный API и возможность замены реализаций.
"""

from .text_processor import (
    TextParser,
    RecordParserInterface,
    SegmenterInterface,
    ResultExporterInterface
)

__all__ = [
    'TextParser',
    'RecordParserInterface',
    'SegmenterInterface',
    'ResultExporterInterface'
]
