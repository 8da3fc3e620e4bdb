"""
Configuration package
"""
from config.constants import (
    WHO_STANDARDS,
    FALLBACK_STANDARD,
    NON_METAL_COLUMNS,
    HPI_THRESHOLDS,
    WaterQualityCategory,
)
from config.schemas import (
    SampleResult,
    BatchSummary,
    AnalysisRequest,
    AnalysisResponse,
)
from config.logging_config import get_logger

from config.settings import settings

__all__ = [
    "settings",
    "WHO_STANDARDS",
    "FALLBACK_STANDARD",
    "NON_METAL_COLUMNS",
    "HPI_THRESHOLDS",
    "WaterQualityCategory",
    "SampleResult",
    "BatchSummary",
    "AnalysisRequest",
    "AnalysisResponse",
    "get_logger",
]
