"""Unit tests for the CSV exporter."""
import pytest

from pot_attractions.errors import MissingField
from pot_attractions.export import CsvExporter, summarize
from pot_attractions.record import CSV_COLUMNS
from tests.conftest import make_record, read_csv

HEADER = "id,name,description_short,description,lat_lng,created_at,updated_at"


class TestCsvExporter:
    def test_header_plus_one_line_per_record(self, tmp_path):
        path = tmp_path / "attractions.csv"
        records = [make_record(f"A{i}") for i in range(5)]

        assert CsvExporter(path).export(records) == 5

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 6
        assert lines[0] == HEADER

    def test_rows_match_records_in_order(self, tmp_path):
        path = tmp_path / "attractions.csv"
        records = [
            make_record("B", description='Castle, "old" and grand'),
            make_record("A", name="Wawel"),
        ]

        CsvExporter(path).export(records)
        df = read_csv(path)

        assert list(df.columns) == CSV_COLUMNS
        assert df.values.tolist() == [
            [getattr(r, col) for col in CSV_COLUMNS] for r in records
        ]

    def test_lat_lng_stays_one_cell(self, tmp_path):
        path = tmp_path / "attractions.csv"
        CsvExporter(path).export([make_record("A1", lat_lng="54.3520,18.6466")])

        assert read_csv(path)["lat_lng"].tolist() == ["54.3520,18.6466"]

    def test_none_becomes_empty_cell(self, tmp_path):
        path = tmp_path / "attractions.csv"
        CsvExporter(path).export([make_record("A1", description=None)])

        assert read_csv(path)["description"].tolist() == [""]

    def test_accepts_plain_dicts(self, tmp_path):
        path = tmp_path / "attractions.csv"
        CsvExporter(path).export([make_record("A1").to_dict()])

        assert read_csv(path)["id"].tolist() == ["A1"]

    def test_missing_field_is_fatal(self, tmp_path):
        row = make_record("A1").to_dict()
        del row["updated_at"]

        with pytest.raises(MissingField, match="updated_at"):
            CsvExporter(tmp_path / "attractions.csv").export([row])

    def test_full_overwrite(self, tmp_path):
        path = tmp_path / "attractions.csv"
        exporter = CsvExporter(path)
        exporter.export([make_record("A1"), make_record("A2")])
        exporter.export([make_record("A3")])

        assert read_csv(path)["id"].tolist() == ["A3"]

    def test_empty_cache_writes_header_only(self, tmp_path):
        path = tmp_path / "nested" / "attractions.csv"
        CsvExporter(path).export([])

        assert path.read_text(encoding="utf-8").splitlines() == [HEADER]


class TestSummarize:
    def test_counts_coordinates(self):
        stats = summarize([make_record("A1"), make_record("A2", lat_lng="")])
        assert stats == {"records": 2, "with_lat_lng": 1}
