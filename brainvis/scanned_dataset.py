"""A directory of scanned subjects with filtering, visual encoding and matrix statistics."""

from __future__ import annotations

import fnmatch
import logging
import math
import os
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from brainvis.scanned_data import Matrix, ScannedData

PathLike = Union[str, "os.PathLike[str]"]

logger = logging.getLogger(__name__)

DEFAULT_MATRIX_KEY = "ROI-ROI Matrix"
NO_KEY = "none"
DEFAULT_POINT_SIZE = 0.02
_MIN_POINT_SIZE = 0.005
_POINT_SIZE_SPAN = 0.05


def compare(left: float, op: str, right: float) -> bool:
    """Apply a comparison operator given as text; unknown operators give False."""
    if op == "<":
        return left < right
    if op == "<=":
        return left <= right
    if op == ">":
        return left > right
    if op == ">=":
        return left >= right
    if op == "==":
        return left == right
    if op == "!=":
        return left != right
    return False


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _csv_files(directory: Path) -> List[Path]:
    return sorted(
        (
            path
            for path in directory.iterdir()
            if path.is_file() and fnmatch.fnmatch(path.name.lower(), "*.csv")
        ),
        key=lambda path: path.name,
    )


def _shape(matrix: Matrix) -> Tuple[int, int]:
    return len(matrix), (len(matrix[0]) if matrix else 0)


class ScannedDataset:
    """All scanned data files of a directory, loaded in file-name order."""

    def __init__(self, directory: PathLike) -> None:
        self._data: List[ScannedData] = []
        self.values_of_categories: Dict[str, List[str]] = {}
        self.min_and_max_of_numbers: Dict[str, Tuple[float, float]] = {}
        self.category_for_color_groups = NO_KEY
        self.category_for_shape_groups = NO_KEY
        self.number_for_sizes = NO_KEY
        self.vis_target_matrix_key = DEFAULT_MATRIX_KEY
        self.reset(directory)

    def reset(self, directory: PathLike) -> None:
        """Reload every ``*.csv`` file in ``directory``."""
        paths = _csv_files(Path(directory))
        data = [ScannedData(i, path) for i, path in enumerate(paths)]

        mismatch = self._first_mismatch(data)
        if mismatch is not None:
            raise ValueError(
                "scanned data has a different number or shape of attributes: "
                f"{paths[mismatch]}"
            )

        values_of_categories: Dict[str, List[str]] = {}
        min_and_max: Dict[str, Tuple[float, float]] = {}
        for sd in data:
            for key, value in sd.categories.items():
                values = values_of_categories.setdefault(key, [])
                if value not in values:
                    values.append(value)
            for key, number in sd.numbers.items():
                low, high = min_and_max.get(key, (number, number))
                min_and_max[key] = (min(low, number), max(high, number))

        self._data = data
        self.values_of_categories = values_of_categories
        self.min_and_max_of_numbers = min_and_max
        self.category_for_color_groups = NO_KEY
        self.category_for_shape_groups = NO_KEY
        self.number_for_sizes = NO_KEY
        self.vis_target_matrix_key = DEFAULT_MATRIX_KEY

    @staticmethod
    def _first_mismatch(data: List[ScannedData]) -> Optional[int]:
        """Position of the first item whose attributes differ from the first one."""
        if not data:
            return None
        first = data[0]
        counts = (
            len(first.sub_ids),
            len(first.categories),
            len(first.numbers),
            len(first.matrices),
        )
        shapes = {key: _shape(matrix) for key, matrix in first.matrices.items()}

        for position, sd in enumerate(data):
            sd_counts = (
                len(sd.sub_ids),
                len(sd.categories),
                len(sd.numbers),
                len(sd.matrices),
            )
            if sd_counts != counts:
                return position
            for key, (rows, cols) in shapes.items():
                matrix = sd.matrices.get(key, [])
                if len(matrix) != rows:
                    logger.warning("number of rows is not equal in %s", key)
                    return position
                if any(len(row) != cols for row in matrix):
                    logger.warning("number of cols is not equal in %s", key)
                    return position
        return None

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> ScannedData:
        return self._data[index]

    def __iter__(self) -> Iterator[ScannedData]:
        return iter(self._data)

    def set_filtered_out(
        self,
        category_status: Mapping[str, Mapping[str, bool]],
        number_status: Mapping[str, Tuple[str, str]],
    ) -> None:
        """Mark data filtered out by unchecked categories or failed number conditions.

        ``category_status`` maps a category key to the checked state of each value;
        ``number_status`` maps a number key to an (operator, value text) pair, where
        an empty value text disables that condition.
        """
        for sd in self._data:
            filtered_out = False
            for key, checks in category_status.items():
                if not checks.get(sd.categories.get(key, ""), False):
                    filtered_out = True
            for key, (op, text) in number_status.items():
                if text != "" and not compare(
                    sd.numbers.get(key, 0.0), op, _to_float(text)
                ):
                    filtered_out = True
            sd.filtered_out = filtered_out

    def set_visible_with_filtering(self) -> None:
        """Show exactly the data that is not filtered out."""
        for sd in self._data:
            sd.visible = not sd.filtered_out

    def set_visible_from_selected(self) -> None:
        """Show exactly the selected data."""
        for sd in self._data:
            sd.visible = sd.selected

    def _group_indices(self, key: str) -> Optional[Dict[int, int]]:
        values = self.values_of_categories.get(key)
        if values is None:
            return None
        groups = {}
        for position, sd in enumerate(self._data):
            value = sd.categories.get(key)
            if value in values:
                groups[position] = values.index(value)
            else:
                logger.warning("cannot find category %r for %s", key, sd.file_name)
        return groups

    def set_color_groups(self, key: str) -> None:
        """Colour each item by the position of its value of category ``key``."""
        groups = self._group_indices(key)
        for position, sd in enumerate(self._data):
            if groups is None:
                sd.color_group = 0
            elif position in groups:
                sd.color_group = groups[position]
        self.category_for_color_groups = key

    def set_shape_groups(self, key: str) -> None:
        """Shape each item by the position of its value of category ``key``."""
        groups = self._group_indices(key)
        for position, sd in enumerate(self._data):
            if groups is None:
                sd.shape_group = 0
            elif position in groups:
                sd.shape_group = groups[position]
        self.category_for_shape_groups = key

    def set_sizes(self, key: str) -> None:
        """Size each item by its value of number ``key`` scaled over the value range."""
        bounds = self.min_and_max_of_numbers.get(key)
        for sd in self._data:
            if bounds is None:
                sd.size = DEFAULT_POINT_SIZE
                continue
            low, high = bounds
            span = high - low
            fraction = (sd.numbers.get(key, 0.0) - low) / span if span else 0.0
            sd.size = _MIN_POINT_SIZE + _POINT_SIZE_SPAN * fraction
        self.number_for_sizes = key

    def by_file_name(self, file_name: str) -> ScannedData:
        """The item loaded from the file called ``file_name``."""
        for sd in self._data:
            if sd.file_name == file_name:
                return sd
        raise KeyError(f"no scanned data with file name {file_name!r}")

    def visible_indices(self) -> List[int]:
        """Positions of the visible items."""
        return [i for i, sd in enumerate(self._data) if sd.visible]

    def selected_indices(self) -> List[int]:
        """Positions of the selected items."""
        return [i for i, sd in enumerate(self._data) if sd.selected]

    def matrix_displayed_indices(self) -> List[int]:
        """Positions of the items whose matrix is displayed."""
        return [i for i, sd in enumerate(self._data) if sd.matrix_displayed]

    def _selected_matrices(self) -> Tuple[List[Matrix], int, int]:
        matrices = [
            self._data[i].matrices.get(self.vis_target_matrix_key, [])
            for i in self.selected_indices()
        ]
        if not matrices:
            return [], 0, 0
        rows, cols = _shape(matrices[0])
        return matrices, rows, cols

    def average_matrix(self) -> Matrix:
        """Element-wise mean of the selected items' target matrices."""
        matrices, rows, cols = self._selected_matrices()
        if rows == 0:
            return []
        total = [[0.0] * cols for _ in range(rows)]
        for matrix in matrices:
            for total_row, row in zip(total, matrix):
                for j, value in enumerate(row[:cols]):
                    total_row[j] += value
        count = len(matrices)
        return [[value / count for value in row] for row in total]

    def diff_matrix(self, index1: int, index2: int) -> Matrix:
        """Element-wise difference of the target matrices of two items."""
        mat1 = self._data[index1].matrices.get(self.vis_target_matrix_key, [])
        mat2 = self._data[index2].matrices.get(self.vis_target_matrix_key, [])
        if len(mat1) != len(mat2) or any(
            len(row1) != len(row2) for row1, row2 in zip(mat1, mat2)
        ):
            raise ValueError("matrix sizes are different")
        return [[a - b for a, b in zip(row1, row2)] for row1, row2 in zip(mat1, mat2)]

    def sd_matrix(self) -> Matrix:
        """Element-wise population standard deviation of the selected matrices."""
        matrices, rows, cols = self._selected_matrices()
        if rows == 0:
            return []
        sums = [[0.0] * cols for _ in range(rows)]
        squares = [[0.0] * cols for _ in range(rows)]
        for matrix in matrices:
            for sum_row, square_row, row in zip(sums, squares, matrix):
                for j, value in enumerate(row[:cols]):
                    sum_row[j] += value
                    square_row[j] += value * value
        count = float(len(matrices))
        return [
            [
                math.sqrt(max(0.0, sq / count - (s / count) ** 2))
                for s, sq in zip(sum_row, square_row)
            ]
            for sum_row, square_row in zip(sums, squares)
        ]

    def max_min_matrix(self) -> Matrix:
        """Element-wise spread of the selected matrices, with zero counted among the values."""
        matrices, rows, cols = self._selected_matrices()
        if rows == 0:
            return []
        mins = [[0.0] * cols for _ in range(rows)]
        maxs = [[0.0] * cols for _ in range(rows)]
        for matrix in matrices:
            for min_row, max_row, row in zip(mins, maxs, matrix):
                for j, value in enumerate(row[:cols]):
                    min_row[j] = min(min_row[j], value)
                    max_row[j] = max(max_row[j], value)
        return [
            [high - low for low, high in zip(min_row, max_row)]
            for min_row, max_row in zip(mins, maxs)
        ]