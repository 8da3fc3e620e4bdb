"""
Test column classification, batch processing and the analysis engine
"""
import numpy as np
import pandas as pd
import pytest

from config.constants import WaterQualityCategory
from config.schemas import SampleResult
from hmpi.core.analysis_engine import AnalysisEngine
from hmpi.core.batch_processor import BatchProcessor
from hmpi.core.column_classifier import classify, is_metal_column
from hmpi.models.sample import RawSample
from hmpi.models.standards import StandardsTable


@pytest.fixture
def processor():
    return BatchProcessor()


# Column Classification Tests

class TestColumnClassifier:
    """Test metal column detection"""

    def test_excludes_identifier_and_coordinates(self):
        sample = RawSample(0, {"id": "S1", "latitude": 1.0, "longitude": 2.0, "As": 0.1, "Pb": 0.2})
        assert classify(sample).columns == ("As", "Pb")

    def test_all_coordinate_spellings_excluded(self):
        sample = RawSample(0, {"lat": 1, "lon": 2, "lng": 3, "Hg": 0.001})
        assert classify(sample).columns == ("Hg",)

    def test_case_insensitive_denylist(self):
        for column in ["ID", "Id", "LATITUDE", "Latitude", "LON", "Lng", " lat "]:
            assert is_metal_column(column) is False, f"{column!r} should not be a metal"

    def test_metal_symbols_kept(self):
        for column in ["As", "Cd", "Zn", "Uranium", "Fe_total"]:
            assert is_metal_column(column) is True

    def test_order_preserved(self):
        sample = RawSample(0, {"Zn": 1, "id": "x", "As": 2, "Cu": 3})
        assert classify(sample).columns == ("Zn", "As", "Cu")

    def test_no_metal_columns(self):
        sample = RawSample(0, {"id": "S1", "lat": 1.0, "lon": 2.0})
        assert len(classify(sample)) == 0


# Batch Processing Tests

class TestBatchProcessor:
    """Test end-to-end processing of sample rows"""

    def test_empty_input(self, processor):
        assert processor.process([]) == []

    def test_empty_input_skips_classification(self, processor, monkeypatch):
        from hmpi.core import batch_processor

        def fail_classify(sample):
            raise AssertionError("classifier should not run")

        monkeypatch.setattr(batch_processor, "classify", fail_classify)

        assert processor.process([]) == []

    def test_scenario(self, processor, scenario_rows):
        result = processor.process(scenario_rows)[0]

        assert isinstance(result, SampleResult)
        assert result.id == "S1"
        assert result.hpi == 150.0
        assert result.hei == 3.0
        assert result.cd == 3.0
        assert result.category == WaterQualityCategory.SLIGHTLY_POLLUTED
        assert result.metals == {"As": 0.02, "Pb": 0.01}

    def test_count_and_order_preserved(self, processor, scenario_rows):
        results = processor.process(scenario_rows)

        assert len(results) == len(scenario_rows)
        assert [r.id for r in results] == ["S1", "S2", "S3"]
        assert [r.category for r in results] == [
            WaterQualityCategory.SLIGHTLY_POLLUTED,
            WaterQualityCategory.SAFE,
            WaterQualityCategory.HAZARDOUS,
        ]

    def test_indices_rounded_to_two_decimals(self, processor, geolocated_rows):
        for result in processor.process(geolocated_rows):
            for value in (result.hpi, result.hei, result.cd):
                assert value == round(value, 2)

        results = processor.process(geolocated_rows)
        assert results[0].hei == 1.5
        assert results[2].hpi == 0.25
        assert results[2].hei == 0.33

    def test_synthesized_ids(self, processor, geolocated_rows):
        results = processor.process(geolocated_rows)

        assert results[0].id == "W-01"
        assert results[1].id == "Sample 2"
        assert results[2].id == "Sample 3"

    def test_lat_lon_spellings(self, processor, geolocated_rows):
        results = processor.process(geolocated_rows)

        assert (results[0].latitude, results[0].longitude) == (23.02, 72.57)
        assert (results[1].latitude, results[1].longitude) == (23.10, 72.61)
        assert (results[2].latitude, results[2].longitude) == (23.2, 72.7)

    def test_missing_coordinates(self, processor, scenario_rows):
        result = processor.process(scenario_rows)[0]
        assert result.latitude is None
        assert result.longitude is None

    def test_non_numeric_concentrations_are_zero(self, processor, geolocated_rows):
        result = processor.process(geolocated_rows)[2]

        assert result.metals == {"As": 0.0, "Cd": 0.0, "Fe": 0.1}
        assert not any(np.isnan(value) for value in result.metals.values())

    def test_unknown_metal_only(self, processor):
        result = processor.process([{"id": "U1", "Zz": 0.5}])[0]

        assert result.hpi == 50.0
        assert result.hei == 0.5
        assert result.category == WaterQualityCategory.SAFE

    def test_oversized_integer_does_not_fail_batch(self, processor):
        results = processor.process([
            {"id": "S1", "As": 10**400, "Pb": 0.01},
            {"id": "S2", "As": 0.02, "Pb": 0.01},
        ])

        assert results[0].metals == {"As": 0.0, "Pb": 0.01}
        assert results[0].hpi == 50.0
        assert results[1].hpi == 150.0

    def test_no_metal_columns_gives_zero_indices(self, processor):
        results = processor.process([{"id": "A", "lat": 1.0}, {"id": "B", "As": 5.0}])

        for result in results:
            assert (result.hpi, result.hei, result.cd) == (0.0, 0.0, 0.0)
            assert result.category == WaterQualityCategory.SAFE
            assert result.metals == {}

    def test_metal_columns_fixed_by_first_row(self, processor):
        rows = [
            {"id": "A", "As": 0.01},
            {"id": "B", "Pb": 0.05},
            {"id": "C", "As": 0.02, "Pb": 0.05},
        ]

        results = processor.process(rows)

        # Pb is never scored because the first row has no Pb column
        assert [r.metals for r in results] == [{"As": 0.01}, {"As": 0.0}, {"As": 0.02}]
        assert [r.hpi for r in results] == [100.0, 0.0, 200.0]

    def test_category_uses_unrounded_hpi(self, processor):
        # HPI 99.996 rounds to 100.0 but is still below the threshold
        result = processor.process([{"Zz": 0.99996}])[0]

        assert result.hpi == 100.0
        assert result.category == WaterQualityCategory.SAFE

    def test_idempotent(self, processor, geolocated_rows):
        first = processor.process(geolocated_rows)
        second = processor.process(geolocated_rows)

        assert [r.model_dump() for r in first] == [r.model_dump() for r in second]

    def test_results_are_frozen(self, processor, scenario_rows):
        result = processor.process(scenario_rows)[0]
        with pytest.raises(Exception):
            result.hpi = 0.0

    def test_injected_standards(self, scenario_rows):
        processor = BatchProcessor(StandardsTable({"As": 0.02, "Pb": 0.005}))

        result = processor.process(scenario_rows)[0]

        # As sub-index 100 with weight 50, Pb sub-index 200 with weight 200
        assert result.hpi == 180.0
        assert result.hei == 3.0
        assert result.category == WaterQualityCategory.SLIGHTLY_POLLUTED

    def test_generator_input(self, processor, scenario_rows):
        results = processor.process(row for row in scenario_rows)
        assert len(results) == 3

    def test_unknown_metals_logged(self, processor, caplog):
        with caplog.at_level("WARNING"):
            processor.process([{"id": "S1", "As": 0.01, "U": 0.02}])

        assert "No permissible standard" in caplog.text
        assert "'U'" in caplog.text


class TestProcessFrame:
    """Test DataFrame input"""

    def test_process_frame(self, processor):
        dataframe = pd.DataFrame({
            "id": ["S1", None],
            "Lat": [23.0, np.nan],
            "Lon": [72.0, np.nan],
            "As": [0.02, np.nan],
            "Pb": [0.01, 0.03],
        })

        results = processor.process_frame(dataframe)

        assert [r.id for r in results] == ["S1", "Sample 2"]
        assert results[0].hpi == 150.0
        assert (results[0].latitude, results[0].longitude) == (23.0, 72.0)
        assert results[1].latitude is None
        assert results[1].metals == {"As": 0.0, "Pb": 0.03}

    def test_empty_frame(self, processor):
        assert processor.process_frame(pd.DataFrame(columns=["id", "As"])) == []

    def test_frame_with_rows_but_no_columns(self, processor):
        results = processor.process_frame(pd.DataFrame(index=range(3)))

        assert [r.id for r in results] == ["Sample 1", "Sample 2", "Sample 3"]
        for result in results:
            assert (result.hpi, result.hei, result.cd) == (0.0, 0.0, 0.0)
            assert result.metals == {}


# Analysis Engine Tests

class TestAnalysisEngine:
    """Test the engine wrapper"""

    def test_run_analysis(self, scenario_rows):
        engine = AnalysisEngine()

        analysis = engine.run_analysis(scenario_rows)

        assert analysis["metal_columns"] == ["As", "Pb"]
        assert len(analysis["results"]) == 3
        assert analysis["summary"].total_samples == 3
        assert analysis["metadata"]["fallback_standard"] == 1.0
        assert analysis["metadata"]["standards"]["As"] == 0.01

    def test_empty_rows(self):
        analysis = AnalysisEngine().run_analysis([])

        assert analysis["results"] == []
        assert analysis["metal_columns"] == []
        assert analysis["summary"].total_samples == 0

    def test_progress_callback_called(self, scenario_rows):
        progress_updates = []

        def progress_callback(progress: float, message: str):
            progress_updates.append((progress, message))

        AnalysisEngine().run_analysis(scenario_rows, progress_callback=progress_callback)

        progresses = [p[0] for p in progress_updates]
        assert progresses == sorted(progresses)
        assert progresses[-1] == 100

        messages = [p[1] for p in progress_updates]
        assert any("metal columns" in m for m in messages)
        assert any("pollution indices" in m for m in messages)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
