"""
Компонент для разбора строки вывода MeCab в запись слова.

Строка токена имеет вид:
    surface<пробельные символы>pos,pos1,pos2,pos3,活用型,活用形,原形,読み,発音
    翻訳	名詞,一般,*,*,*,*,翻訳,ホンヤク,ホンヤク
"""

import re
import logging
from typing import List, Optional

from ..errors import MalformedRecord
from ..interfaces.text_processor import RecordParserInterface
from ..text_structure import Word

logger = logging.getLogger(__name__)

# Позиции полей в схеме вывода MeCab (IPA-словарь)
SURFACE, POS, POS_SUBONE, POS_SUBTWO, POS_SUBTHREE = 0, 1, 2, 3, 4
INFLECTION, CONJUGATION, ROOT, READING, PRONUNCIATION = 5, 6, 7, 8, 9


class WordRecordParser(RecordParserInterface):
    """Парсер строк токенов MeCab."""

    def __init__(self, placeholder: str = "*", min_fields: int = 10):
        """
        Инициализирует парсер.

        Args:
            placeholder: Заглушка анализатора для неприменимого поля
            min_fields: Минимальное число полей в строке токена
        """
        self.placeholder = placeholder
        self.min_fields = min_fields
        # Любая серия пробельных символов схлопывается в один разделитель
        self.whitespace_pattern = re.compile(r'\s+')

    def split_fields(self, line: str) -> List[str]:
        """
        Разбивает строку на плоский список полей.

        Args:
            line: Строка токена

        Returns:
            Поля в порядке схемы анализатора
        """
        return self.whitespace_pattern.sub(',', line).split(',')

    def parse_line(self, line: str) -> Word:
        """
        Разбирает строку токена.

        Пустая строка не является ошибкой: возвращается пустая запись.

        Args:
            line: Строка токена

        Returns:
            Заполненная запись слова

        Raises:
            MalformedRecord: если полей меньше min_fields
        """
        if not line:
            return Word()

        fields = self.split_fields(line)
        if len(fields) < self.min_fields:
            logger.error(f"Строка MeCab содержит {len(fields)} полей вместо {self.min_fields}: {line!r}")
            raise MalformedRecord(line, len(fields), self.min_fields)
        if len(fields) > self.min_fields:
            logger.debug(f"Лишние поля ({len(fields) - self.min_fields}) проигнорированы: {line!r}")

        return Word(
            surface=fields[SURFACE],
            pos=fields[POS],
            pos_subone=self._optional(fields[POS_SUBONE]),
            pos_subtwo=self._optional(fields[POS_SUBTWO]),
            pos_subthree=self._optional(fields[POS_SUBTHREE]),
            inflection=fields[INFLECTION],
            conjugation=fields[CONJUGATION],
            root=fields[ROOT],
            reading=fields[READING],
            pronunciation=fields[PRONUNCIATION],
        )

    def _optional(self, value: str) -> Optional[str]:
        """Заглушка анализатора означает отсутствие значения."""
        return None if value == self.placeholder else value
