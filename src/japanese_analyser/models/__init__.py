from .base_model import BaseAnalyzerModel, AnalyzerOutput
from .mecab_model import MecabModel
from .model_factory import ModelFactory

__all__ = [
    "BaseAnalyzerModel",
    "AnalyzerOutput",
    "MecabModel",
    "ModelFactory",
]
