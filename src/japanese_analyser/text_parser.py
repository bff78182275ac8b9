"""
Модуль для разбора японского текста через MeCab

Содержит:
- JapaneseTextParser: запуск MeCab на файле и построение Text
- parse(): функциональная обёртка с настройками из config.yaml
"""

import logging
from typing import Optional

from .config import config
from .components.record_parser import WordRecordParser
from .components.segmenter import SentenceSegmenter
from .interfaces.text_processor import TextParser
from .models.base_model import BaseAnalyzerModel
from .models.mecab_model import MecabModel
from .models.model_factory import ModelFactory
from .text_structure import Text

logger = logging.getLogger(__name__)


def segmenter_from_config() -> SentenceSegmenter:
    """Сегментатор с маркером EOS, заглушкой и числом полей из config.yaml."""
    return SentenceSegmenter(
        record_parser=WordRecordParser(
            placeholder=config.get_placeholder(),
            min_fields=config.get_min_fields(),
        ),
        terminator=config.get_sentence_terminator(),
    )


class JapaneseTextParser(TextParser):
    """Класс для разбора текста через внешний анализатор"""

    def __init__(self, model: Optional[BaseAnalyzerModel] = None,
                 segmenter: Optional[SentenceSegmenter] = None) -> None:
        """
        Args:
            model: Анализатор (по умолчанию создаётся из config.yaml)
            segmenter: Сегментатор вывода (по умолчанию из config.yaml)
        """
        self.model = model or ModelFactory.create_or_fail(config.get_model_config())
        self.segmenter = segmenter or segmenter_from_config()

    def parse(self, file_path: str, analyzer_path: str = None) -> Text:
        """
        Обрабатывает текстовый файл.

        Поддерживается только простой текст, форматирование после
        обработки теряется.

        Args:
            file_path: Путь к текстовому файлу
            analyzer_path: Путь к MeCab (по умолчанию из конфигурации)

        Returns:
            Разобранный текст

        Raises:
            InvalidFilePath: файл не существует
            InvalidAnalyzerPath: MeCab не найден
            MalformedRecord: строка вывода не соответствует схеме
            AnalyzerExecutionError: MeCab завершился с ошибкой
        """
        model = self._model_for_path(analyzer_path) if analyzer_path else self.model

        output = model.analyze_file(file_path)
        logger.info(f"MeCab обработал {file_path} за {output.processing_time_ms:.1f} мс")
        text = self.parse_output(output.text)
        logger.info(f"Разобрано предложений: {len(text)}, слов: {text.word_count}")
        return text

    def _model_for_path(self, analyzer_path: str) -> BaseAnalyzerModel:
        """Копия текущего MeCab с другим путём; кодировка и таймаут сохраняются."""
        if isinstance(self.model, MecabModel):
            return MecabModel(
                path=analyzer_path,
                encoding=self.model.encoding,
                timeout=self.model.timeout,
            )
        model_cfg = config.get_model_config()
        model_cfg['path'] = analyzer_path
        return ModelFactory.create_or_fail(model_cfg)

    def parse_output(self, output: str) -> Text:
        """Строит Text из уже полученного вывода MeCab."""
        return self.segmenter.segment(output)


def parse(file_path: str, analyzer_path: Optional[str] = None) -> Text:
    """Разбирает файл через MeCab с настройками из config.yaml."""
    return JapaneseTextParser().parse(file_path, analyzer_path=analyzer_path)


def parse_output(output: str) -> Text:
    """Разбирает уже полученный вывод MeCab."""
    return segmenter_from_config().segment(output)
