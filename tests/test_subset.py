import pytest

from brainvis.roi import Rois
from brainvis.subset import SubsetRoisEditor

ROIS_CSV = "\n".join(
    [
        "name,x,y,z,group,rank",
        "A,0,0,0,0,0",
        "B,1,0,0,0,1",
        "C,0,1,0,1,-1",
        "D,0,0,1,1,2",
    ]
)


@pytest.fixture
def rois(tmp_path):
    path = tmp_path / "rois.csv"
    path.write_text(ROIS_CSV, encoding="utf-8")
    return Rois(path)


def test_initial_lists(rois):
    editor = SubsetRoisEditor(rois)
    assert editor.in_range == ["A", "B", "D"]
    assert editor.out_of_range == ["C"]


def test_move_out_inserts_at_front_keeping_order(rois):
    editor = SubsetRoisEditor(rois)
    editor.move_out([2, 0])
    assert editor.in_range == ["B"]
    assert editor.out_of_range == ["A", "D", "C"]


def test_move_in_inserts_at_front(rois):
    editor = SubsetRoisEditor(rois)
    editor.move_in([0])
    assert editor.in_range == ["C", "A", "B", "D"]
    assert editor.out_of_range == []


def test_moves_preserve_all_names(rois):
    editor = SubsetRoisEditor(rois)
    editor.move_out([1])
    editor.move_in([1])
    assert sorted(editor.in_range + editor.out_of_range) == ["A", "B", "C", "D"]


def test_apply_sets_order(rois):
    editor = SubsetRoisEditor(rois)
    editor.move_out([0, 2])
    order = editor.apply()
    assert order == [rois.index_of("B")]
    assert rois.order == order
    assert rois[rois.index_of("B")].rank == 0
    assert rois[rois.index_of("A")].rank == -1


def test_apply_with_added_roi(rois):
    editor = SubsetRoisEditor(rois)
    editor.move_in([0])
    editor.apply()
    assert [rois[i].name for i in rois.order] == ["C", "A", "B", "D"]
    assert rois.count_ranked() == len(rois)


def test_lists_are_copies(rois):
    editor = SubsetRoisEditor(rois)
    editor.in_range.clear()
    assert editor.in_range == ["A", "B", "D"]


def test_bad_index_raises_and_leaves_lists(rois):
    editor = SubsetRoisEditor(rois)
    with pytest.raises(IndexError):
        editor.move_out([0, 5])
    assert editor.in_range == ["A", "B", "D"]
    assert editor.out_of_range == ["C"]