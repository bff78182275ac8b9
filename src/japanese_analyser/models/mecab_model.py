"""
Обёртка над командой mecab, реализующая интерфейс BaseAnalyzerModel.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from typing import Dict, Any, Optional

from ..errors import AnalyzerExecutionError, InvalidAnalyzerPath, InvalidFilePath
from .base_model import BaseAnalyzerModel, AnalyzerOutput

logger = logging.getLogger(__name__)


class MecabModel(BaseAnalyzerModel):
    """MeCab как внешний процесс: один запуск на файл, вывод читается целиком."""

    def __init__(self, path: str = "/usr/local/bin/mecab", encoding: str = "utf-8",
                 timeout: Optional[float] = None) -> None:
        self.path = path
        self.encoding = encoding
        self.timeout = timeout

    def load(self) -> None:
        if not os.path.exists(self.path):
            logger.error(f"MeCab не найден: {self.path}")
            raise InvalidAnalyzerPath(self.path)

    def validate_file(self, file_path: str) -> None:
        """Проверяет исходный файл до запуска процесса."""
        if not file_path or not os.path.exists(file_path):
            logger.error(f"Исходный файл не найден: {file_path!r}")
            raise InvalidFilePath(file_path)

    def analyze_file(self, file_path: str) -> AnalyzerOutput:
        """
        Запускает MeCab на файле.

        Args:
            file_path: Путь к текстовому файлу

        Returns:
            Полный вывод MeCab

        Raises:
            InvalidFilePath: файл не существует
            InvalidAnalyzerPath: MeCab не найден
            AnalyzerExecutionError: MeCab завершился с ошибкой или по таймауту
        """
        self.validate_file(file_path)
        self.load()

        start = time.time()
        logger.debug(f"Запуск MeCab: {self.path} {file_path} (timeout={self.timeout})")
        try:
            result = subprocess.run(
                [self.path, file_path],
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.error(f"MeCab не завершился за {self.timeout} с")
            raise AnalyzerExecutionError(f"MeCab не завершился за {self.timeout} с") from e
        except OSError as e:
            logger.error(f"Не удалось запустить MeCab: {e}")
            raise AnalyzerExecutionError(f"Не удалось запустить MeCab: {e}") from e

        stderr = self._decode_stderr(result.stderr)
        if result.returncode != 0:
            logger.error(f"MeCab завершился с кодом {result.returncode}: {stderr}")
            raise AnalyzerExecutionError(
                f"MeCab завершился с кодом {result.returncode}",
                returncode=result.returncode,
                stderr=stderr,
            )

        try:
            output = result.stdout.decode(self.encoding)
        except UnicodeDecodeError as e:
            logger.error(f"Вывод MeCab не в кодировке {self.encoding}: {e}")
            raise AnalyzerExecutionError(f"Вывод MeCab не в кодировке {self.encoding}") from e

        elapsed = (time.time() - start) * 1000.0
        logger.debug(f"MeCab завершён: {len(output)} символов за {elapsed:.1f} мс")
        return AnalyzerOutput(
            text=output,
            processing_time_ms=elapsed,
            model_name=self.path,
            model_type="mecab",
            metadata={'file_path': file_path, 'stderr': stderr},
        )

    def _decode_stderr(self, stderr: Optional[bytes]) -> str:
        if not stderr:
            return ""
        return stderr.decode(self.encoding, errors="replace").strip()

    def get_model_info(self) -> Dict[str, Any]:
        return {
            "name": self.path,
            "type": "mecab",
            "available": os.path.exists(self.path),
            "encoding": self.encoding,
            "timeout": self.timeout,
        }
