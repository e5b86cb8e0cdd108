import pytest

from binary_radix.benchmark import BenchmarkResult, BenchmarkRun
from binary_radix.report import build_series, log10, render_svg, write_svg


def _result(size, *seconds):
    result = BenchmarkResult(size=size, iterations=len(seconds))
    for i, s in enumerate(seconds, 1):
        result.runs.append(BenchmarkRun(size=size, iteration=i, seconds=s, passes=1, validated=True))
    return result


def test_build_series():
    series = build_series([_result(100, 0.2, 0.4), _result(1000, 1.0)])
    assert series["average"] == [(100, pytest.approx(0.3)), (1000, 1.0)]
    assert series["best"] == [(100, 0.2), (1000, 1.0)]
    assert series["worst"] == [(100, 0.4), (1000, 1.0)]


def test_zero_durations_are_floored():
    series = build_series([_result(10, 0.0)])
    assert series["best"][0][1] > 0


def test_render_svg_has_one_polyline_per_series():
    svg = render_svg([_result(100, 0.2, 0.4), _result(10_000, 3.0, 5.0)])
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    assert svg.count("<polyline") == 3
    assert "10,000" in svg


def test_render_single_size():
    svg = render_svg([_result(1000, 0.5)])
    assert svg.count("<polyline") == 3


def test_render_requires_timings():
    with pytest.raises(ValueError):
        render_svg([])


def test_log10_rejects_non_positive():
    with pytest.raises(ValueError):
        log10(0)


def test_write_svg_creates_parent(tmp_path):
    out = write_svg([_result(100, 0.1)], tmp_path / "docs" / "img" / "chart.svg")
    assert out.exists()


def test_title_is_escaped():
    svg = render_svg([_result(100, 0.1)], title="n < 1,000 & friends")
    assert "n &lt; 1,000 &amp; friends" in svg


def test_axis_ticks_cover_every_decade():
    svg = render_svg([_result(10, 0.01), _result(100_000, 2.0)])
    for label in ("10", "100", "1,000", "10,000", "100,000"):
        assert f">{label}</text>" in svg
