"""A single scanned subject: ids, categories, numbers and matrices from one CSV file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

PathLike = Union[str, "os.PathLike[str]"]
Matrix = List[List[float]]


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _read_matrix(lines: Iterator[Tuple[int, str]]) -> Matrix:
    """Consume matrix rows until a blank line or the end of the file."""
    matrix: Matrix = []
    for _, line in lines:
        if line == "":
            break
        matrix.append([_to_float(value) for value in line.split(",")])
    return matrix


class ScannedData:
    """One scanned data file together with its display state.

    The file has a header line followed by ``name,type,value`` lines, where
    type is ``id``, ``category``, ``number`` or ``matrix``. A ``matrix`` line
    is followed by comma-separated rows ending at a blank line.
    """

    def __init__(self, id: int, path: PathLike) -> None:
        self.id = id
        self.file_name = ""
        self.sub_ids: Dict[str, int] = {}
        self.categories: Dict[str, str] = {}
        self.numbers: Dict[str, float] = {}
        self.matrices: Dict[str, Matrix] = {}

        self.visible = True
        self.pos: Tuple[float, float] = (0.0, 0.0)
        self.size = 0.02
        self.color_group = 0
        self.shape_group = 0
        self.selected = False
        self.filtered_out = False
        self.matrix_displayed = False
        self.matrix_pos: Tuple[float, float] = (0.0, 0.0)
        self.mds_error = 0.0

        self._load(Path(path))

    def _load(self, path: Path) -> None:
        text = path.read_text(encoding="utf-8")
        self.file_name = path.name

        sub_ids: Dict[str, int] = {}
        categories: Dict[str, str] = {}
        numbers: Dict[str, float] = {}
        matrices: Dict[str, Matrix] = {}

        lines = iter(enumerate(text.splitlines()[1:], start=2))
        for line_num, line in lines:
            elements = line.split(",")
            if len(elements) < 3:
                raise ValueError(
                    f"line {line_num}: expected at least 3 values "
                    f"(name,type,value), got {len(elements)}"
                )
            name, data_type, value = elements[0], elements[1], elements[2]
            if data_type == "id":
                sub_ids[name] = _to_int(value)
            elif data_type == "category":
                categories[name] = value
            elif data_type == "number":
                numbers[name] = _to_float(value)
            elif data_type == "matrix":
                matrices[name] = _read_matrix(lines)
            else:
                raise ValueError(
                    f"line {line_num}: unknown data type {data_type!r} "
                    "(use id, category, number or matrix)"
                )

        self.sub_ids = dict(sorted(sub_ids.items()))
        self.categories = dict(sorted(categories.items()))
        self.numbers = dict(sorted(numbers.items()))
        self.matrices = dict(sorted(matrices.items()))

    def matrix_element(self, key: str, row: int, col: int) -> float:
        """Value at ``row``, ``col`` of the matrix named ``key``."""
        if row < 0 or col < 0:
            raise IndexError(f"matrix position out of range: ({row}, {col})")
        return self.matrices[key][row][col]

    def switch_selected(self) -> None:
        """Toggle the selection state."""
        self.selected = not self.selected

    def __repr__(self) -> str:
        return f"ScannedData(id={self.id!r}, file_name={self.file_name!r})"