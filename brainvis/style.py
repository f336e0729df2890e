"""Colours, colour maps and point shapes used by the views."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue, self.alpha):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0-255: {channel}")

    @property
    def rgba_f(self) -> Tuple[float, float, float, float]:
        """Channels scaled to the range 0.0-1.0."""
        return (
            self.red / 255.0,
            self.green / 255.0,
            self.blue / 255.0,
            self.alpha / 255.0,
        )


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _data_lines(path: PathLike) -> List[Tuple[int, str]]:
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return list(enumerate(lines[1:], start=2))


def load_colors(path: PathLike) -> List[Color]:
    """Read colours from a CSV file with a header and rows r,g,b,a."""
    colors = []
    for line_num, line in _data_lines(path):
        elements = line.split(",")
        if len(elements) < 4:
            raise ValueError(
                f"line {line_num}: colour needs 4 numbers, got {len(elements)}"
            )
        colors.append(Color(*(_to_int(e) for e in elements[:4])))
    return colors


def load_shapes(path: PathLike) -> List[int]:
    """Read shape numbers from the first column of a CSV file with a header."""
    return [_to_int(line.split(",")[0]) for _, line in _data_lines(path)]


@dataclass
class Style:
    """Fixed colours plus colour maps and shapes loaded from a style directory."""

    dir_path: PathLike
    bg_color: Color = field(init=False)
    mds_error_color_center: Color = field(init=False)
    mds_error_color_peri: Color = field(init=False)
    stroke_color: Color = field(init=False)
    selected_fill_color: Color = field(init=False)
    selected_stroke_color: Color = field(init=False)
    time_line_color: Color = field(init=False)
    line_from_matrix_to_point_color: Color = field(init=False)
    brain_mesh_color: Color = field(init=False)
    bg_color_for_controls: Color = field(init=False)
    colormap: List[Color] = field(init=False, default_factory=list)
    uncertainty_colormap: List[Color] = field(init=False, default_factory=list)
    point_colors: List[Color] = field(init=False, default_factory=list)
    roi_colors: List[Color] = field(init=False, default_factory=list)
    point_shapes: List[int] = field(init=False, default_factory=list)

    def __init__(self, dir_path: PathLike) -> None:
        self.colormap = []
        self.uncertainty_colormap = []
        self.point_colors = []
        self.roi_colors = []
        self.point_shapes = []
        self.reset(dir_path)

    def reset(self, dir_path: PathLike) -> None:
        """Restore the fixed colours and reload the files in ``dir_path``."""
        self.dir_path = dir_path
        self.bg_color = Color(24, 26, 31, 255)
        self.mds_error_color_center = Color(100, 100, 100, 20)
        self.mds_error_color_peri = Color(100, 100, 100, 4)
        self.stroke_color = Color(0, 0, 0, 255)
        self.selected_fill_color = Color(150, 200, 150, 100)
        self.selected_stroke_color = Color(80, 80, 255)
        self.time_line_color = Color(229, 196, 148, 80)
        self.line_from_matrix_to_point_color = Color(180, 184, 193, 255)
        self.brain_mesh_color = Color(255, 255, 255, 8)
        self.bg_color_for_controls = Color(237, 237, 237, 255)

        directory = Path(dir_path)
        self.colormap = load_colors(directory / "correlation_colormap.csv")
        self.uncertainty_colormap = load_colors(
            directory / "uncertainty_colormap.csv"
        )
        self.point_colors = load_colors(directory / "point_colors.csv")
        self.roi_colors = load_colors(directory / "group_colors.csv")
        self.point_shapes = load_shapes(directory / "point_shapes.csv")