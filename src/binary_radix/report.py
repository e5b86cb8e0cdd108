"""
Render benchmark timings as a log-log SVG line chart.

No external dependencies required: the SVG is assembled as text.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from .benchmark import BenchmarkResult

Series = Dict[str, List[Tuple[int, float]]]

COLORS = {
    "average": "#1f77b4",
    "best": "#2ca02c",
    "worst": "#d62728",
}

# Timer resolution floor so a 0.0 s run can still be drawn on a log axis
MIN_SECONDS = 1e-6


def log10(x: float) -> float:
    if x <= 0:
        raise ValueError("Values must be positive for log10 axis")
    return math.log10(x)


def build_series(results: Sequence[BenchmarkResult]) -> Series:
    series: Series = {name: [] for name in COLORS}
    for result in results:
        if not result.runs:
            continue
        durations = [max(run.seconds, MIN_SECONDS) for run in result.runs]
        series["average"].append((result.size, sum(durations) / len(durations)))
        series["best"].append((result.size, min(durations)))
        series["worst"].append((result.size, max(durations)))
    return series


def _line(x1: float, y1: float, x2: float, y2: float, stroke: str = "black", stroke_width: float = 1.0) -> str:
    return f'<line x1="{x1:.2f}" y1="{y1:.2f}" x2="{x2:.2f}" y2="{y2:.2f}" stroke="{stroke}" stroke-width="{stroke_width}" />'


def _text(x: float, y: float, label: str, anchor: str = "start", **attrs: str) -> str:
    extra = "".join(f' {key.replace("_", "-")}="{value}"' for key, value in attrs.items())
    return f'<text x="{x:.2f}" y="{y:.2f}" text-anchor="{anchor}"{extra}>{escape(label)}</text>'


class _LogLogFrame:
    """Maps (size, seconds) pairs onto the plotting area of the chart."""

    width, height = 900, 560
    left, bottom, top, right = 120, 80, 60, 40

    def __init__(self, points: Sequence[Tuple[int, float]]) -> None:
        # Whole decades on x, padded so a single size still has width
        self.x_min = math.floor(min(log10(n) for n, _ in points))
        self.x_max = max(math.ceil(max(log10(n) for n, _ in points)), self.x_min + 1)
        self.y_min = min(log10(t) for _, t in points) - 0.2
        self.y_max = max(log10(t) for _, t in points) + 0.2

    @property
    def origin(self) -> Tuple[float, float]:
        return self.left, self.height - self.bottom

    def x(self, n: float) -> float:
        span = self.width - self.left - self.right
        return self.left + (log10(n) - self.x_min) / (self.x_max - self.x_min) * span

    def y(self, t: float) -> float:
        span = self.height - self.bottom - self.top
        return self.height - self.bottom - (log10(t) - self.y_min) / (self.y_max - self.y_min) * span

    def axes(self) -> List[str]:
        x0, y0 = self.origin
        parts = [
            _line(x0, y0, self.width - self.right, y0, stroke_width=1.5),
            _line(x0, self.top, x0, y0, stroke_width=1.5),
        ]
        for exp in range(self.x_min, self.x_max + 1):
            n = 10 ** exp
            parts.append(_line(self.x(n), y0, self.x(n), y0 + 6))
            parts.append(_text(self.x(n), y0 + 24, f"{n:,}", "middle"))
        for exp in range(math.floor(self.y_min), math.ceil(self.y_max) + 1):
            if not self.y_min <= exp <= self.y_max:
                continue
            t = 10.0 ** exp
            parts.append(_line(x0 - 6, self.y(t), x0, self.y(t)))
            parts.append(_text(x0 - 10, self.y(t) + 4, f"{t:g}s", "end"))
        return parts

    def labels(self, title: str) -> List[str]:
        x0, y0 = self.origin
        mid_y = (self.top + y0) / 2
        return [
            _text(self.width / 2, self.top - 20, title, "middle", font_size="18"),
            _text((x0 + self.width - self.right) / 2, self.height - 20, "Input size (n)", "middle"),
            _text(25, mid_y, "Time (seconds, log scale)", "middle", transform=f"rotate(-90 25 {mid_y:.2f})"),
        ]

    def series(self, name: str, data: Sequence[Tuple[int, float]]) -> List[str]:
        color = COLORS[name]
        coords = " ".join(f"{self.x(n):.2f},{self.y(t):.2f}" for n, t in data)
        parts = [f'<polyline fill="none" stroke="{color}" stroke-width="2" points="{coords}" />']
        for n, t in data:
            parts.append(
                f'<circle cx="{self.x(n):.2f}" cy="{self.y(t):.2f}" r="4" fill="{color}" stroke="white" stroke-width="1.5">'
                f"<title>{name}: n={n:,}, t={t:.3f}s</title></circle>"
            )
        return parts

    def legend(self) -> List[str]:
        lx, ly, row = self.width - self.right - 200, self.top + 10, 22
        parts = [
            f'<rect x="{lx - 10}" y="{ly - 14}" width="180" height="{len(COLORS) * row + 10}" fill="#f8f8f8" stroke="#ccc" />'
        ]
        for i, (name, color) in enumerate(COLORS.items()):
            y = ly + i * row
            parts.append(_line(lx, y, lx + 24, y, stroke=color, stroke_width=3))
            parts.append(_text(lx + 36, y + 5, name))
        return parts


def render_svg(results: Sequence[BenchmarkResult], title: str = "Binary Radix Sort Performance (log-log)") -> str:
    series = build_series(results)
    points = [p for s in series.values() for p in s]
    if not points:
        raise ValueError("No timings to plot")

    frame = _LogLogFrame(points)
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{frame.width}" height="{frame.height}" '
        f'viewBox="0 0 {frame.width} {frame.height}">',
        "<style>text { font-family: sans-serif; font-size: 13px; }</style>",
    ]
    parts += frame.axes()
    parts += frame.labels(title)
    for name, data in series.items():
        if data:
            parts += frame.series(name, data)
    parts += frame.legend()
    parts.append("</svg>")
    return "\n".join(parts)


def write_svg(results: Sequence[BenchmarkResult], out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_svg(results))
    return out_path
