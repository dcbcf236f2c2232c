"""Tests for dashboard export."""

import datetime
import json

import pytest
from sentiscope.core.models import FilterCriteria
from sentiscope.services.dashboard import build_dashboard
from sentiscope.utils.data_prep import export_to_json, prepare_export, to_json


class TestPrepareExport:
    """Test export payload shape."""

    def test_sections(self, sample_rows):
        """Summary, charts and filters are all present."""
        data = prepare_export(build_dashboard(sample_rows, FilterCriteria(hotel="Hotel A")))
        assert data["filters"]["hotel"] == "Hotel A"
        assert data["summary"]["aspect_rows"] == 4
        assert data["summary"]["filtered_rows"] == 3
        assert data["summary"]["total_reviews"] == 2
        assert [s["key"] for s in data["sentiments"]] == ["positive", "neutral", "negative"]
        assert data["metadata"]["export_timestamp"] is None
        assert "rows" not in data

    def test_include_rows(self, sample_rows):
        """Filtered rows can be attached."""
        data = prepare_export(build_dashboard(sample_rows, FilterCriteria(language="id")), include_rows=True)
        assert [row["review_id"] for row in data["rows"]] == ["R2"]

    def test_json_keeps_missing_cells_null(self, sample_rows):
        """Heatmap cells without data serialize as null."""
        data = prepare_export(build_dashboard(sample_rows))
        text = to_json(data, timestamp=datetime.datetime(2025, 1, 2, 3, 4, 5))
        parsed = json.loads(text)
        hotel_b = next(row for row in parsed["heatmap"] if row["hotel"] == "Hotel B")
        assert hotel_b["Food"] == 0.0
        assert hotel_b["Service"] is None
        assert parsed["metadata"]["export_timestamp"] == "2025-01-02T03:04:05"

    def test_export_to_file(self, sample_rows, tmp_path):
        """Writes UTF-8 JSON to disk."""
        path = tmp_path / "export.json"
        export_to_json(prepare_export(build_dashboard(sample_rows)), str(path))
        parsed = json.loads(path.read_text(encoding="utf-8"))
        assert parsed["summary"]["positive_rate"] == 50
        assert parsed["metadata"]["export_timestamp"]


if __name__ == "__main__":
    pytest.main([__file__])
