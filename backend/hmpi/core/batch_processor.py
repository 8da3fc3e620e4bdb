"""
Batch processor that turns sample rows into pollution index records
"""
from typing import Any, List, Mapping, Optional, Sequence

import pandas as pd

from config.constants import FALLBACK_STANDARD, INDEX_PRECISION
from config.logging_config import get_logger
from config.schemas import SampleResult
from hmpi.core.column_classifier import classify
from hmpi.models.categorizer import categorize_water_quality
from hmpi.models.indices import calculate_cd, calculate_hei, calculate_hpi
from hmpi.models.sample import MetalColumnSet, RawSample
from hmpi.models.standards import StandardsTable

logger = get_logger(__name__)


class BatchProcessor:
    """
    Computes HPI, HEI and Cd for every row of a batch.

    This class:
    1. Detects metal columns once, from the first row
    2. Scores each row independently against the injected standards
    3. Returns one SampleResult per row, in input order
    """

    def __init__(self, standards: Optional[StandardsTable] = None):
        self.standards = standards if standards is not None else StandardsTable.default()

    # Public API
    def process(self, rows: Sequence[Mapping[str, Any]]) -> List[SampleResult]:
        rows = list(rows)
        if not rows:
            return []

        samples = [RawSample(index, row) for index, row in enumerate(rows)]
        metals = classify(samples[0])

        logger.info(f"Detected metal columns: {list(metals)}")
        unknown = self.standards.missing(metals)
        if unknown:
            logger.warning(
                "No permissible standard for %s; using fallback standard %s",
                unknown,
                FALLBACK_STANDARD,
            )

        results = [self.process_sample(sample, metals) for sample in samples]
        logger.info(f"Processed {len(results)} samples")
        return results

    def process_frame(self, dataframe: pd.DataFrame) -> List[SampleResult]:
        """Process the records of a DataFrame; column order drives metal order."""
        # A frame with rows but no columns still yields one result per row
        if dataframe is None or len(dataframe.index) == 0:
            return []
        return self.process(dataframe.to_dict(orient="records"))

    def process_sample(self, sample: RawSample, metals: MetalColumnSet) -> SampleResult:
        hpi = calculate_hpi(sample, metals, self.standards)
        hei = calculate_hei(sample, metals, self.standards)
        cd = calculate_cd(sample, metals, self.standards)

        return SampleResult(
            id=sample.identifier(),
            latitude=sample.latitude(),
            longitude=sample.longitude(),
            hpi=round(hpi, INDEX_PRECISION),
            hei=round(hei, INDEX_PRECISION),
            cd=round(cd, INDEX_PRECISION),
            category=categorize_water_quality(hpi),
            metals={str(metal): sample.concentration(metal) for metal in metals},
        )

    # Helper methods
    def metal_columns(self, rows: Sequence[Mapping[str, Any]]) -> MetalColumnSet:
        rows = list(rows)
        if not rows:
            return MetalColumnSet()
        return classify(RawSample(0, rows[0]))
