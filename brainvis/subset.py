"""Choosing which ROIs take part in the analysis."""

from __future__ import annotations

from typing import Iterable, List

from brainvis.roi import Rois


def _take(source: List[str], indices: Iterable[int]) -> List[str]:
    """Remove the items at ``indices`` from ``source``, returning them in list order."""
    chosen = sorted(set(indices), reverse=True)
    for index in chosen:
        if not 0 <= index < len(source):
            raise IndexError(f"list index out of range: {index}")
    taken = [source.pop(index) for index in chosen]
    taken.reverse()
    return taken


class SubsetRoisEditor:
    """Two lists of ROI names: those used in the analysis and those left out."""

    def __init__(self, rois: Rois) -> None:
        self.rois = rois
        self._in_range: List[str] = [rois[index].name for index in rois.order]
        self._out_of_range: List[str] = [roi.name for roi in rois if roi.rank < 0]

    @property
    def in_range(self) -> List[str]:
        """Names of ROIs used in the analysis, in order."""
        return list(self._in_range)

    @property
    def out_of_range(self) -> List[str]:
        """Names of ROIs not used in the analysis."""
        return list(self._out_of_range)

    def move_out(self, indices: Iterable[int]) -> None:
        """Move the used ROIs at ``indices`` to the front of the unused list."""
        self._out_of_range[:0] = _take(self._in_range, indices)

    def move_in(self, indices: Iterable[int]) -> None:
        """Move the unused ROIs at ``indices`` to the front of the used list."""
        self._in_range[:0] = _take(self._out_of_range, indices)

    def apply(self) -> List[int]:
        """Set the ROI order to the used list and return that order."""
        order = [self.rois.index_of(name) for name in self._in_range]
        self.rois.set_order(order)
        return order