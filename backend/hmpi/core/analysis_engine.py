"""
Analysis engine that runs the batch processor and builds the summary
"""
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from config.constants import FALLBACK_STANDARD
from config.logging_config import get_logger
from hmpi.core.batch_processor import BatchProcessor
from hmpi.core.reporting import summarize_results
from hmpi.models.standards import StandardsTable

logger = get_logger(__name__)


class AnalysisEngine:
    """Orchestrates one analysis request"""

    def __init__(self, standards: Optional[StandardsTable] = None):
        self.processor = BatchProcessor(standards)

    @property
    def standards(self) -> StandardsTable:
        return self.processor.standards

    def run_analysis(
        self,
        rows: Sequence[Mapping[str, Any]],
        progress_callback: Optional[Callable[[float, str], None]] = None
    ) -> Dict[str, Any]:
        """
        Compute indices and summary for a batch of sample rows

        Args:
            rows: Sample rows (column name -> value)
            progress_callback: Optional progress callback

        Returns:
            Results, summary, detected metal columns and metadata
        """
        rows = list(rows)
        logger.info("Analysis started with %s rows", len(rows))

        self._update_progress(progress_callback, 10, "Detecting metal columns...")
        metal_columns = list(self.processor.metal_columns(rows))

        self._update_progress(progress_callback, 30, "Calculating pollution indices...")
        results = self.processor.process(rows)

        self._update_progress(progress_callback, 90, "Summarizing results...")
        summary = summarize_results(results)

        self._update_progress(progress_callback, 100, "Complete!")
        logger.info(
            "Analysis completed: %s safe, %s slightly polluted, %s hazardous",
            summary.safe,
            summary.slightly_polluted,
            summary.hazardous,
        )

        return {
            "results": results,
            "summary": summary,
            "metal_columns": metal_columns,
            "metadata": {
                "standards": self.standards.as_dict(),
                "fallback_standard": FALLBACK_STANDARD,
            },
        }

    def _update_progress(self, callback: Optional[Callable], progress: float, message: str):
        """Update progress if callback provided"""
        if callback:
            callback(progress, message)
