"""
Фабрика для создания анализаторов по конфигурации.
"""

from __future__ import annotations

from typing import Optional, Dict, Any

from ..config import DEFAULT_MECAB_PATH
from ..errors import InvalidAnalyzerConfig
from .base_model import BaseAnalyzerModel
from .mecab_model import MecabModel


class ModelFactory:
    """Создаёт анализаторы на основе конфигурации."""

    @staticmethod
    def create(model_cfg: Dict[str, Any]) -> Optional[BaseAnalyzerModel]:
        """Создаёт анализатор из словаря настроек.

        Ожидаемый формат:
        {
          "type": "mecab",
          "path": "/usr/local/bin/mecab",
          "encoding": "utf-8",
          "timeout": None,
        }
        """
        if not model_cfg:
            return None
        model_type = (model_cfg.get("type") or "").lower()
        if model_type == "mecab":
            return MecabModel(
                path=model_cfg.get("path") or DEFAULT_MECAB_PATH,
                encoding=model_cfg.get("encoding") or "utf-8",
                timeout=model_cfg.get("timeout"),
            )
        return None

    @staticmethod
    def create_or_fail(model_cfg: Dict[str, Any]) -> BaseAnalyzerModel:
        """Создаёт анализатор или выбрасывает ошибку (Fail Fast).

        Raises:
            InvalidAnalyzerConfig: если тип анализатора отсутствует или неизвестен
        """
        model = ModelFactory.create(model_cfg)
        if model is None:
            raise InvalidAnalyzerConfig(model_cfg)
        return model
