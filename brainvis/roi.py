"""Regions of interest (ROIs) and the order in which they are displayed."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Union

PathLike = Union[str, "os.PathLike[str]"]


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def _to_uint(text: str) -> int:
    return max(_to_int(text), 0)


@dataclass
class Roi:
    """A single region of interest with its position and display state."""

    name: str = ""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    group: int = 0
    rank: int = -1
    visible: bool = True
    size: float = 0.01
    selected: bool = False
    filtered_out: bool = False


def load_rois(path: PathLike) -> List[Roi]:
    """Read ROIs from a CSV file with a header line and rows name,x,y,z,group,rank."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    rois = []
    for line_num, line in enumerate(lines[1:], start=2):
        values = line.split(",")
        if len(values) < 6:
            raise ValueError(
                f"line {line_num}: expected 6 values "
                f"(name,x,y,z,group,rank), got {len(values)}"
            )
        name, x, y, z, group, rank = values[:6]
        rois.append(
            Roi(
                name=name,
                x=_to_float(x),
                y=_to_float(y),
                z=_to_float(z),
                group=_to_uint(group),
                rank=_to_int(rank),
            )
        )
    return rois


class Rois:
    """A collection of ROIs with a display order over a subset of them.

    The order is a list of ROI indices; the position of an index in the
    order is that ROI's rank. ROIs not in the order have rank -1.
    """

    def __init__(self, path: PathLike) -> None:
        self._rois: List[Roi] = []
        self._order: List[int] = []
        self._initial_order: List[int] = []
        self._names_to_indices: dict[str, int] = {}
        self.hovered_index = -1
        self.reset(path)

    def reset(self, path: PathLike) -> None:
        """Reload all ROIs from a CSV file and rebuild the order from ranks."""
        self._rois = load_rois(path)
        self.set_order_from_ranks()
        self._initial_order = list(self._order)
        self._names_to_indices = {roi.name: i for i, roi in enumerate(self._rois)}
        self.hovered_index = -1

    def __len__(self) -> int:
        return len(self._rois)

    def __getitem__(self, index: int) -> Roi:
        return self._rois[index]

    def __iter__(self) -> Iterator[Roi]:
        return iter(self._rois)

    @property
    def order(self) -> List[int]:
        """The ROI indices in display order."""
        return list(self._order)

    @property
    def initial_order(self) -> List[int]:
        """The order built from the ranks in the loaded file."""
        return list(self._initial_order)

    def count_ranked(self) -> int:
        """Number of ROIs with a non-negative rank."""
        return sum(1 for roi in self._rois if roi.rank >= 0)

    def set_order_from_ranks(self) -> None:
        """Build the order so that each ranked ROI sits at its rank."""
        order = [0] * self.count_ranked()
        for index, roi in enumerate(self._rois):
            if roi.rank >= 0:
                if roi.rank >= len(order):
                    raise ValueError(
                        f"ROI {roi.name!r} has rank {roi.rank} but only "
                        f"{len(order)} ROIs are ranked"
                    )
                order[roi.rank] = index
        self.set_order(order)

    def reset_order(self) -> None:
        """Restore the order the ROIs had when they were loaded."""
        self.set_order(self._initial_order)

    def groups(self) -> List[int]:
        """Distinct group numbers, in order of first appearance."""
        return list(dict.fromkeys(roi.group for roi in self._rois))

    def index_on_order(self, pos: int) -> int:
        """ROI index shown at position ``pos`` of the order."""
        if pos < 0:
            raise IndexError(f"order position out of range: {pos}")
        return self._order[pos]

    def index_of(self, name: str) -> int:
        """Index of the ROI with the given name."""
        try:
            return self._names_to_indices[name]
        except KeyError:
            raise KeyError(f"no ROI named {name!r}") from None

    def set_order(self, order: Iterable[int]) -> None:
        """Replace the order and reassign every ROI's rank to match it."""
        new_order = list(order)
        for index in new_order:
            if not 0 <= index < len(self._rois):
                raise IndexError(f"ROI index out of range: {index}")
        self._order = new_order
        for roi in self._rois:
            roi.rank = -1
        for rank, index in enumerate(new_order):
            self._rois[index].rank = rank

    def set_groups(self, groups: Iterable[int]) -> None:
        """Assign groups to ROIs following the current order."""
        for pos, group in enumerate(groups):
            self._rois[self._order[pos]].group = group

    def write_order_names(self, path: PathLike) -> None:
        """Write the names of the ordered ROIs, one per line."""
        text = "".join(f"{self._rois[index].name}\n" for index in self._order)
        Path(path).write_text(text, encoding="utf-8")

    def write_csv(self, path: PathLike) -> None:
        """Write every ROI as name,x,y,z,group,rank lines without a header."""
        text = "".join(
            f"{roi.name},{roi.x:g},{roi.y:g},{roi.z:g},{roi.group},{roi.rank}\n"
            for roi in self._rois
        )
        Path(path).write_text(text, encoding="utf-8")