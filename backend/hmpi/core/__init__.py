"""
Core batch processing components.
"""

from .analysis_engine import AnalysisEngine
from .batch_processor import BatchProcessor
from .column_classifier import classify

__all__ = [
    "AnalysisEngine",
    "BatchProcessor",
    "classify",
]
