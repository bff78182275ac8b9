"""
Компонент для экспорта разобранного текста.

Отвечает за экспорт результатов в различные форматы:
Excel, CSV, JSON с временными метками.
"""

import json
import csv
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import pandas as pd
from ..interfaces.text_processor import ResultExporterInterface
from ..text_structure import Text, Word
import logging

logger = logging.getLogger(__name__)

WORD_COLUMNS = [
    'surface', 'pos', 'pos_subone', 'pos_subtwo', 'pos_subthree',
    'inflection', 'conjugation', 'root', 'reading', 'pronunciation',
]

EXPORT_SUFFIXES = ('.xlsx', '.csv', '.json')


class ResultExporter(ResultExporterInterface):
    """Экспортёр разобранного текста."""

    def __init__(self, output_dir: str = "data/results", main_sheet_name: str = "Слова",
                 placeholder: str = "*"):
        """
        Инициализирует экспортёр.

        Args:
            output_dir: Папка для сохранения результатов
            main_sheet_name: Название листа со словами в Excel
            placeholder: Заглушка анализатора для неприменимого поля
        """
        self.output_dir = Path(output_dir)
        self.main_sheet_name = main_sheet_name
        self.placeholder = placeholder

    def _resolve(self, filepath: Union[str, Path], suffix: str) -> Path:
        """
        Приводит путь к формату экспорта.

        Расширение другого формата экспорта заменяется на suffix, любое
        другое расширение дополняется им. Относительные имена без папки
        кладутся в output_dir.
        """
        path = Path(filepath)
        current = path.suffix.lower()
        if current in EXPORT_SUFFIXES and current != suffix:
            logger.warning(f"Расширение {path.suffix} заменено на {suffix}: {path}")
            path = path.with_suffix(suffix)
        elif current != suffix:
            path = path.with_name(path.name + suffix)
        if not path.is_absolute() and path.parent == Path('.'):
            path = self.output_dir / path
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    def word_rows(self, text: Text) -> List[Dict[str, Any]]:
        """Строки таблицы слов: индекс предложения, индекс слова и десять полей."""
        rows = []
        for sentence_index, sentence in enumerate(text.sentences):
            for word_index, word in enumerate(sentence.words):
                row: Dict[str, Any] = {'sentence': sentence_index, 'index': word_index}
                row.update(word.to_dict())
                rows.append(row)
        return rows

    def root_frequency(self, text: Text) -> Counter:
        """Частотность словарных форм (для слов без root берётся поверхностная форма)."""
        return Counter(self._frequency_key(word) for word in text.words())

    def _frequency_key(self, word: Word) -> str:
        if word.root and word.root != self.placeholder:
            return word.root
        return word.surface or ''

    def export_to_excel(self, text: Text, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует текст в Excel формат.

        Args:
            text: Разобранный текст
            filepath: Путь для сохранения файла

        Returns:
            Путь к созданному файлу (None, если нечего экспортировать)
        """
        if not text or not text.word_count:
            logger.info("Нет данных для экспорта в Excel")
            return None

        filepath = self._resolve(filepath, '.xlsx')
        try:
            words_df = pd.DataFrame(self.word_rows(text), columns=['sentence', 'index'] + WORD_COLUMNS)
            sentences_df = pd.DataFrame([
                {'sentence': i, 'surface': s.to_surface(), 'words': len(s)}
                for i, s in enumerate(text.sentences)
            ])
            stats_df = pd.DataFrame({
                'Параметр': ['Предложений', 'Слов', 'Уникальных словарных форм', 'Дата анализа'],
                'Значение': [
                    len(text),
                    text.word_count,
                    len(self.root_frequency(text)),
                    datetime.now().strftime('%Y-%m-%d %H:%M:%S'),
                ],
            })
            freq_df = pd.DataFrame(
                self.root_frequency(text).most_common(),
                columns=['root', 'frequency'],
            )

            with pd.ExcelWriter(filepath, engine='openpyxl') as writer:
                words_df.to_excel(writer, sheet_name=self.main_sheet_name, index=False)
                sentences_df.to_excel(writer, sheet_name='Предложения', index=False)
                stats_df.to_excel(writer, sheet_name='Статистика', index=False)
                freq_df.to_excel(writer, sheet_name='Частотность', index=False)
        except Exception as e:
            logger.error(f"Ошибка экспорта в Excel: {e}")
            raise

        logger.info(f"Результат экспортирован в Excel: {filepath}")
        return filepath

    def export_to_csv(self, text: Text, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует слова текста в CSV, по строке на слово.

        Args:
            text: Разобранный текст
            filepath: Путь для сохранения файла
        """
        if not text or not text.word_count:
            logger.info("Нет данных для экспорта в CSV")
            return None

        filepath = self._resolve(filepath, '.csv')
        try:
            with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=['sentence', 'index'] + WORD_COLUMNS)
                writer.writeheader()
                for row in self.word_rows(text):
                    writer.writerow({k: ('' if v is None else v) for k, v in row.items()})
        except OSError as e:
            logger.error(f"Ошибка экспорта в CSV: {e}")
            raise

        logger.info(f"Результат экспортирован в CSV: {filepath} ({text.word_count} слов)")
        return filepath

    def export_to_json(self, text: Text, filepath: Union[str, Path]) -> Optional[Path]:
        """
        Экспортирует текст в JSON формат.

        Args:
            text: Разобранный текст
            filepath: Путь для сохранения файла
        """
        if not text:
            logger.info("Нет данных для экспорта в JSON")
            return None

        filepath = self._resolve(filepath, '.json')
        json_data = {
            'metadata': {
                'timestamp': datetime.now().isoformat(),
                'sentences': len(text),
                'words': text.word_count,
            },
            'surface': text.to_surface(),
            'sentences': [
                {
                    'surface': sentence.to_surface(),
                    'words': [word.to_dict() for word in sentence.words],
                }
                for sentence in text.sentences
            ],
        }
        try:
            with open(filepath, 'w', encoding='utf-8') as f:
                json.dump(json_data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            logger.error(f"Ошибка экспорта в JSON: {e}")
            raise

        logger.info(f"Результат экспортирован в JSON: {filepath}")
        return filepath

    def generate_filename(self, prefix: str, extension: str) -> str:
        """Имя файла результата с временной меткой."""
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"{prefix}_{timestamp}.{extension.lstrip('.')}"
