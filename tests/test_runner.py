import asyncio
import logging
from itertools import count
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

from html2jpg.runner import ConversionResult, ConversionRunner


class RecordingRenderer:
    """Writes a placeholder file per call and optionally fails on one input."""

    def __init__(self, fail_on: Optional[str] = None) -> None:
        self.calls: List[Tuple[str, Path]] = []
        self._fail_on = fail_on

    async def render(self, html_path, output_path) -> None:
        self.calls.append((html_path, Path(output_path)))
        if html_path == self._fail_on:
            raise RuntimeError(f"cannot load {html_path}")
        Path(output_path).write_bytes(b"\xff\xd8\xff\xd9")


def test_runner_converts_in_order_and_reports_each_success(tmp_path: Path, caplog):
    renderer = RecordingRenderer()
    runner = ConversionRunner(renderer, tmp_path / "output")
    files = ["b.html", "a.html", "c.HTML"]

    with caplog.at_level(logging.INFO):
        results = asyncio.run(runner.run(files))

    assert [html for html, _ in renderer.calls] == files
    assert [r.output_path.name for r in results] == ["b.jpg", "a.jpg", "c.jpg"]
    assert all(isinstance(r, ConversionResult) for r in results)
    assert sorted(p.name for p in (tmp_path / "output").iterdir()) == ["a.jpg", "b.jpg", "c.jpg"]

    messages = [record.getMessage() for record in caplog.records]
    assert "Converting 3 HTML file(s) to JPG..." in messages
    assert any(m.startswith("All conversions complete!") for m in messages)


def test_runner_stops_at_first_failure(tmp_path: Path):
    renderer = RecordingRenderer(fail_on="broken.html")
    output_dir = tmp_path / "output"
    runner = ConversionRunner(renderer, output_dir)

    with pytest.raises(RuntimeError, match="broken.html"):
        asyncio.run(runner.run(["one.html", "broken.html", "three.html"]))

    assert [html for html, _ in renderer.calls] == ["one.html", "broken.html"]
    assert [p.name for p in output_dir.iterdir()] == ["one.jpg"]


def test_runner_creates_missing_output_dir_once(tmp_path: Path, caplog):
    output_dir = tmp_path / "nested" / "output"
    runner = ConversionRunner(RecordingRenderer(), output_dir)

    with caplog.at_level(logging.INFO):
        assert runner.ensure_output_dir() is True
        assert runner.ensure_output_dir() is False

    assert output_dir.is_dir()
    created = [r for r in caplog.records if "Created output directory" in r.getMessage()]
    assert len(created) == 1


def test_runner_reuses_existing_output_dir_and_overwrites(tmp_path: Path, caplog):
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    (output_dir / "page.jpg").write_bytes(b"stale")
    runner = ConversionRunner(RecordingRenderer(), output_dir)

    with caplog.at_level(logging.INFO):
        asyncio.run(runner.run(["page.html"]))

    assert (output_dir / "page.jpg").read_bytes() == b"\xff\xd8\xff\xd9"
    assert not any("Created output directory" in r.getMessage() for r in caplog.records)


def test_runner_records_elapsed_time_from_timer(tmp_path: Path):
    ticks = count(start=10, step=2)
    runner = ConversionRunner(
        RecordingRenderer(), tmp_path / "output", timer=lambda: float(next(ticks))
    )

    results = asyncio.run(runner.run(["x.html", "y.html"]))

    assert [r.elapsed_seconds for r in results] == [2.0, 2.0]
    assert results[0].output_path == tmp_path / "output" / "x.jpg"
