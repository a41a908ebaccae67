"""Tests for cli.py module."""

from __future__ import annotations

import json

from conftest import FIXTURE_ID
from match_timeline.cli import main


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


class TestBuildMatchdaysCli:
    def test_writes_one_file_per_round(self, tmp_path, sample_fixture_payload):
        events = [{"fixtureId": FIXTURE_ID, **e} for e in sample_fixture_payload.pop("events")]
        fixtures_path = _write(tmp_path / "fixtures.raw.json", {"response": [sample_fixture_payload]})
        events_path = _write(tmp_path / "events.raw.json", {"response": events})
        out_dir = tmp_path / "matchdays"

        exit_code = main(["--fixtures", str(fixtures_path), "--events", str(events_path), "--out", str(out_dir)])

        assert exit_code == 0
        written = json.loads((out_dir / "1.json").read_text(encoding="utf-8"))
        assert written["season"] == 2025
        assert written["round"] == 1
        (match,) = written["matches"]
        assert match["id"] == str(FIXTURE_ID)
        assert match["status"] == {"state": "FT", "halfTimeScore": "1–1"}
        assert [e["minute"] for e in match["events"]] == ["12'", "34'", "45'+2", "46'", "70'"]

    def test_uses_embedded_events_without_events_file(self, tmp_path, sample_fixture_payload):
        fixtures_path = _write(tmp_path / "fixtures.raw.json", {"response": [sample_fixture_payload]})
        out_dir = tmp_path / "out"

        assert main(["--fixtures", str(fixtures_path), "--out", str(out_dir), "--season", "2024"]) == 0

        written = json.loads((out_dir / "1.json").read_text(encoding="utf-8"))
        assert written["season"] == 2024
        assert len(written["matches"][0]["events"]) == 5

    def test_output_is_deterministic(self, tmp_path, sample_fixture_payload):
        fixtures_path = _write(tmp_path / "fixtures.raw.json", {"response": [sample_fixture_payload]})
        main(["--fixtures", str(fixtures_path), "--out", str(tmp_path / "a")])
        main(["--fixtures", str(fixtures_path), "--out", str(tmp_path / "b")])
        assert (tmp_path / "a" / "1.json").read_bytes() == (tmp_path / "b" / "1.json").read_bytes()

    def test_non_object_fixture_entries_are_skipped(self, tmp_path, sample_fixture_payload):
        fixtures_path = _write(tmp_path / "fixtures.raw.json", {"response": ["junk", sample_fixture_payload]})
        out_dir = tmp_path / "out"

        assert main(["--fixtures", str(fixtures_path), "--out", str(out_dir)]) == 0

        written = json.loads((out_dir / "1.json").read_text(encoding="utf-8"))
        assert written["season"] == 2025
        assert [m["id"] for m in written["matches"]] == [str(FIXTURE_ID)]
