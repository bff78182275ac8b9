"""
Компонент для разбиения вывода MeCab на предложения.

MeCab завершает каждое предложение строкой EOS. Каждая прочая непустая
строка описывает один токен и добавляется в текущее предложение.
"""

import logging
from typing import Optional

from ..interfaces.text_processor import SegmenterInterface, RecordParserInterface
from ..text_structure import Sentence, Text
from .record_parser import WordRecordParser

logger = logging.getLogger(__name__)


class SentenceSegmenter(SegmenterInterface):
    """Строит Text из полного вывода анализатора."""

    def __init__(self, record_parser: Optional[RecordParserInterface] = None,
                 terminator: str = "EOS"):
        """
        Args:
            record_parser: Парсер строк токенов (по умолчанию WordRecordParser)
            terminator: Маркер конца предложения
        """
        self.record_parser = record_parser or WordRecordParser()
        self.terminator = terminator

    def segment(self, output: str) -> Text:
        """
        Разбивает вывод анализатора на предложения.

        Пустые предложения (подряд идущие EOS, вывод без токенов) в Text
        не попадают. Предложение без завершающего EOS сохраняется.

        Args:
            output: Полный вывод MeCab

        Returns:
            Разобранный текст

        Raises:
            MalformedRecord: если строка токена не соответствует схеме
        """
        text = Text()
        current = Sentence()

        for line_no, line in enumerate(output.splitlines(), start=1):
            if line == self.terminator:
                if current.words:
                    text.sentences.append(current)
                    current = Sentence()
                continue
            if not line.strip():
                continue
            try:
                current.append(self.record_parser.parse_line(line))
            except Exception:
                logger.error(f"Ошибка разбора строки {line_no} вывода MeCab")
                raise

        if current.words:
            logger.debug("Последнее предложение без EOS добавлено в текст")
            text.sentences.append(current)

        logger.debug(f"Сегментация завершена: предложений={len(text)}, слов={text.word_count}")
        return text
