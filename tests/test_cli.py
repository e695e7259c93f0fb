"""Tests for the command-line entry point."""

import json

from booking_timeline.cli import load_bookings_file, main


def _write(tmp_path, payload, name="bookings.json"):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestLoadBookingsFile:
    def test_plain_list(self, tmp_path):
        path = _write(tmp_path, [{"id": 1, "time": "09:00"}])
        assert load_bookings_file(path) == [{"id": 1, "time": "09:00"}]

    def test_api_envelope(self, tmp_path):
        path = _write(tmp_path, {"success": True, "bookings": [{"id": 1}]})
        assert load_bookings_file(path) == [{"id": 1}]


class TestMain:
    def test_text_output(self, tmp_path, capsys):
        path = _write(tmp_path, [{"id": 1, "time": "09:00", "duration": 60}])
        assert main(["--bookings", str(path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("TIMELINE")
        assert "AVAILABLE:" in out

    def test_json_output(self, tmp_path, capsys):
        path = _write(
            tmp_path,
            [
                {"id": 1, "time": "09:00", "duration": 60, "date": "2026-10-18"},
                {"id": 2, "time": "09:15", "duration": 30, "date": "2026-10-18"},
                {"id": 3, "time": "09:00", "duration": 30, "date": "2026-10-19"},
            ],
        )
        assert main(["--bookings", str(path), "--date", "2026-10-18", "--json"]) == 0
        layout = json.loads(capsys.readouterr().out)
        assert layout["lane_count"] == 2
        assert [b["id"] for b in layout["laned_bookings"]] == [1, 2]

    def test_report_file(self, tmp_path):
        path = _write(tmp_path, [])
        report = tmp_path / "out.txt"
        assert main(["--bookings", str(path), "--report", str(report)]) == 0
        assert report.read_text(encoding="utf-8").startswith("TIMELINE")

    def test_missing_file(self, tmp_path):
        assert main(["--bookings", str(tmp_path / "nope.json")]) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["--bookings", str(path)]) == 1

    def test_wrong_shape(self, tmp_path):
        path = _write(tmp_path, "just a string")
        assert main(["--bookings", str(path)]) == 1

    def test_directory_instead_of_file(self, tmp_path):
        folder = tmp_path / "bookings"
        folder.mkdir()
        assert main(["--bookings", str(folder)]) == 1
