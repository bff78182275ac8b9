"""
Базовые интерфейсы и структуры данных для внешних морфологических анализаторов.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class AnalyzerOutput:
    """Сырой вывод анализатора для одного файла."""
    text: str
    processing_time_ms: float
    model_name: str
    model_type: str
    metadata: Optional[Dict[str, Any]] = None


class BaseAnalyzerModel(ABC):
    """Базовый интерфейс внешнего анализатора."""

    @abstractmethod
    def load(self) -> None:
        """Проверяет доступность анализатора (без запуска процесса)."""
        pass

    @abstractmethod
    def analyze_file(self, file_path: str) -> AnalyzerOutput:
        """Запускает анализатор на файле и возвращает его полный вывод."""
        pass

    @abstractmethod
    def get_model_info(self) -> Dict[str, Any]:
        """Возвращает информацию об анализаторе (путь, тип)."""
        pass
