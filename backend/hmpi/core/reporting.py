"""
Batch summaries and the tabular hand-off for display/export
"""
from typing import List, Sequence

import pandas as pd

from config.constants import INDEX_PRECISION, WaterQualityCategory
from config.schemas import BatchSummary, SampleResult

RESULT_COLUMNS = ["ID", "Latitude", "Longitude", "HPI", "HEI", "Cd", "Category"]


def metal_column_label(metal: str) -> str:
    # Unit suffix keeps cadmium ("Cd") apart from the Cd index column
    return f"{metal} (mg/L)"


def summarize_results(results: Sequence[SampleResult]) -> BatchSummary:
    total = len(results)
    if total == 0:
        return BatchSummary()

    categories = [result.category for result in results]
    average_hpi = sum(result.hpi for result in results) / total

    return BatchSummary(
        total_samples=total,
        safe=categories.count(WaterQualityCategory.SAFE),
        slightly_polluted=categories.count(WaterQualityCategory.SLIGHTLY_POLLUTED),
        hazardous=categories.count(WaterQualityCategory.HAZARDOUS),
        average_hpi=round(average_hpi, INDEX_PRECISION),
        samples_with_coordinates=sum(
            1 for result in results if result.latitude is not None and result.longitude is not None
        ),
    )


def results_to_frame(results: Sequence[SampleResult]) -> pd.DataFrame:
    """
    Flatten results into one row per sample.

    Columns are ID, Latitude, Longitude, HPI, HEI, Cd and Category followed
    by one "<metal> (mg/L)" column per metal, in detection order.
    """
    metals: List[str] = []
    for result in results:
        for metal in result.metals:
            if metal not in metals:
                metals.append(metal)

    records = []
    for result in results:
        record = {
            "ID": result.id,
            "Latitude": result.latitude,
            "Longitude": result.longitude,
            "HPI": result.hpi,
            "HEI": result.hei,
            "Cd": result.cd,
            "Category": result.category,
        }
        for metal in metals:
            record[metal_column_label(metal)] = result.metals.get(metal, 0.0)
        records.append(record)

    columns = RESULT_COLUMNS + [metal_column_label(metal) for metal in metals]
    dataframe = pd.DataFrame.from_records(records, columns=columns)
    for column in ("Latitude", "Longitude"):
        dataframe[column] = pd.to_numeric(dataframe[column], errors="coerce").astype(float)
    return dataframe
