"""Tests for the command-line entry point."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

from climb_tracker.core.config import Settings, get_settings
from climb_tracker.core.logging import setup_logging
from climb_tracker.main import analyze_gpx, main, run

# ~100 m between consecutive points along a meridian
LAT_STEP = 0.1 / 111.195


def _write_gpx(path: Path, elevations: list[float]) -> Path:
    points = "\n".join(
        f'      <trkpt lat="{45.0 + i * LAT_STEP:.8f}" lon="6.0"><ele>{elevation:.1f}</ele></trkpt>'
        for i, elevation in enumerate(elevations)
    )
    path.write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
        "  <trk><trkseg>\n"
        f"{points}\n"
        "  </trkseg></trk>\n"
        "</gpx>\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def climb_gpx(tmp_path: Path) -> Path:
    """1 km flat, 3 km at 8%, 2 km flat."""
    elevations = [300.0] * 11
    elevations += [300.0 + 8.0 * i for i in range(1, 31)]
    elevations += [540.0] * 20
    return _write_gpx(tmp_path / "climb.gpx", elevations)


class TestAnalyzeGpx:
    """Tests for the load-and-detect helper."""

    def test_detects_climb(self, climb_gpx: Path) -> None:
        """The climb in the file is found."""
        summary, climbs = analyze_gpx(climb_gpx, Settings())

        assert summary.total_distance == pytest.approx(6.0, abs=0.05)
        assert summary.total_elevation_gain == pytest.approx(240.0)
        assert len(climbs) == 1
        assert 6.5 < climbs[0].average_gradient < 8.0


class TestRun:
    """Tests for report rendering and exit codes."""

    def test_text_report(self, climb_gpx: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The text report lists the climb."""
        assert run(climb_gpx) == 0

        out = capsys.readouterr().out
        assert "Climbs: 1" in out
        assert "Côte 500m" in out

    def test_json_report(self, climb_gpx: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The JSON report is machine readable."""
        assert run(climb_gpx, as_json=True) == 0

        data = json.loads(capsys.readouterr().out)
        assert len(data["climbs"]) == 1
        assert data["climbs"][0]["category"] == "2"
        assert data["max_elevation"] == 540.0

    def test_missing_file_fails(self, tmp_path: Path) -> None:
        """A handled error gives a non-zero exit code."""
        assert run(tmp_path / "missing.gpx") == 1

    def test_latin1_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A GPX declared as ISO-8859-1 is analyzed like any other."""
        path = tmp_path / "montee.gpx"
        path.write_bytes(
            (
                '<?xml version="1.0" encoding="ISO-8859-1"?>\n'
                '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">\n'
                "  <trk><name>Montée</name><trkseg>\n"
                '    <trkpt lat="45.0" lon="6.0"><ele>300.0</ele></trkpt>\n'
                '    <trkpt lat="45.001" lon="6.0"><ele>305.0</ele></trkpt>\n'
                "  </trkseg></trk>\n"
                "</gpx>\n"
            ).encode("iso-8859-1")
        )

        assert run(path) == 0
        assert "Climbs: 0" in capsys.readouterr().out

    def test_undecodable_file_fails(self, tmp_path: Path) -> None:
        """Bytes that do not match the file encoding give exit code 1."""
        path = tmp_path / "broken.gpx"
        path.write_bytes(b'<?xml version="1.0"?>\n<gpx><trk><name>Mont\xe9e</name></trk></gpx>\n')

        assert run(path) == 1

    def test_debug_leaves_environment_alone(
        self, climb_gpx: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """--debug raises the log level for this run only."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        get_settings.cache_clear()

        assert run(climb_gpx, debug=True) == 0

        assert logging.getLogger("climb_tracker").level == logging.DEBUG
        assert "LOG_LEVEL" not in os.environ
        assert get_settings().logging.level == "INFO"

        setup_logging("INFO")


class TestMain:
    """Tests for argument parsing."""

    def test_exits_with_run_status(self, climb_gpx: Path) -> None:
        """main() exits with the status of the run."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(climb_gpx), "--json"])

        assert exc_info.value.code == 0

    def test_requires_gpx_argument(self) -> None:
        """The GPX path is mandatory."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
