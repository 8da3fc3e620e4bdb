"""Computed records and API request/response schemas."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["Safe", "Slightly Polluted", "Hazardous"]


class SampleResult(BaseModel):
    """Pollution indices computed for one sample."""

    model_config = ConfigDict(frozen=True)

    id: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    hpi: float = Field(description="Heavy Metal Pollution Index")
    hei: float = Field(description="Heavy Metal Evaluation Index")
    cd: float = Field(description="Contamination Degree")
    category: Category
    metals: Dict[str, float] = Field(default_factory=dict)


class BatchSummary(BaseModel):
    """Category counts and averages for a processed batch."""

    total_samples: int = 0
    safe: int = 0
    slightly_polluted: int = 0
    hazardous: int = 0
    average_hpi: float = 0.0
    samples_with_coordinates: int = 0


class AnalysisRequest(BaseModel):
    rows: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Sample rows; key order of the first row sets the metal column order",
        examples=[[{"id": "S1", "lat": 23.1, "lon": 72.5, "As": 0.02, "Pb": 0.01}]],
    )
    standards: Optional[Dict[str, float]] = Field(
        default=None,
        description="Replaces the configured standards table for this request (mg/L)",
    )


class AnalysisResponse(BaseModel):
    sample_count: int
    metal_columns: List[str] = Field(default_factory=list)
    results: List[SampleResult] = Field(default_factory=list)
    summary: BatchSummary


class StandardsResponse(BaseModel):
    standards: Dict[str, float]
    fallback_standard: float


class ErrorResponse(BaseModel):
    detail: str
