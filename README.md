# brainvis

The data model for a brain connectivity visual analytics tool. It is plain
Python and needs nothing outside the standard library.

## Modules

### `brainvis.roi`

- `Roi`: a dataclass for one region of interest. Its fields are `name`, `x`,
  `y`, `z`, `group`, `rank`, `visible`, `size`, `selected` and `filtered_out`.
- `load_rois(path)`: reads a CSV file made of a header line and then rows of the
  form `name,x,y,z,group,rank`. A row with fewer than six values raises
  `ValueError`.
- `Rois(path)`: the loaded ROIs. It supports `len()`, indexing and iteration.
  It keeps a display order, a list of ROI indices in which an index's position
  is that ROI's rank. ROIs that are not in the order have rank -1.
  - `order` and `initial_order`: copies of the current order and of the order
    built at load time.
  - `count_ranked()`, `set_order_from_ranks()`, `set_order(order)`,
    `reset_order()` and `reset(path)`.
  - `groups()`: the distinct group numbers, in the order they first appear.
  - `set_groups(groups)`: assigns groups following the current order.
  - `index_on_order(pos)` and `index_of(name)`.
  - `hovered_index`: the hovered ROI, or -1 when there is none.
  - `write_order_names(path)`: writes one name per line.
  - `write_csv(path)`: writes `name,x,y,z,group,rank` rows with no header.

### `brainvis.style`

- `Color`: a frozen RGBA colour with channels from 0 to 255. Its `rgba_f`
  property gives the channels scaled to the range 0.0 to 1.0.
- `load_colors(path)` reads `r,g,b,a` rows. `load_shapes(path)` reads the first
  column as integers. Both skip a header line.
- `Style(dir_path)`: a set of fixed colours such as `bg_color` and
  `selected_fill_color`. It also loads `colormap`, `uncertainty_colormap`,
  `point_colors`, `roi_colors` and `point_shapes` from these files in the
  directory: `correlation_colormap.csv`, `uncertainty_colormap.csv`,
  `point_colors.csv`, `group_colors.csv` and `point_shapes.csv`.
  `reset(dir_path)` loads them again.

### `brainvis.interpolation`

- `find_k_nearest(points, pos, k)`: the indices of the `k` points nearest to
  `pos`, nearest first.
- `weighted_average(values, points, pos, k)`: the inverse-distance weighted
  average of the values at the `k` nearest points.

### `brainvis.scanned_data`

- `ScannedData(id, path)`: one subject file. After a header line, each line has
  the form `name,type,value`, where `type` is `id`, `category`, `number` or
  `matrix`. A `matrix` line is followed by comma-separated rows, and a blank line
  ends them. The loaded values are held in `sub_ids`, `categories`, `numbers`
  and `matrices`. The display state is held in `visible`, `pos`, `size`,
  `color_group`, `shape_group`, `selected`, `filtered_out`, `matrix_displayed`,
  `matrix_pos` and `mds_error`.
  - `matrix_element(key, row, col)`: one element of a matrix.
  - `switch_selected()`: flips the selection.

### `brainvis.scanned_dataset`

- `ScannedDataset(directory)`: loads every `*.csv` file in the directory, in
  file-name order. If the files differ in how many attributes they have or in
  the shape of their matrices, it raises `ValueError`.
  - `values_of_categories` and `min_and_max_of_numbers`: summaries over all
    the files.
  - `set_filtered_out(category_status, number_status)`: filters by checked
    category values and by `(operator, value)` number conditions.
  - `set_visible_with_filtering()` and `set_visible_from_selected()`.
  - `set_color_groups(key)`, `set_shape_groups(key)` and `set_sizes(key)`:
    visual encodings. The key `"none"` resets them to the defaults.
  - `by_file_name(name)`, `visible_indices()`, `selected_indices()` and
    `matrix_displayed_indices()`.
  - `average_matrix()`, `sd_matrix()` and `max_min_matrix()`: computed over the
    selected items' `vis_target_matrix_key` matrix, which defaults to
    `"ROI-ROI Matrix"`.
  - `diff_matrix(i, j)`: the difference between two items' matrices.
- `compare(left, op, right)`: applies one of `<`, `<=`, `>`, `>=`, `==` or
  `!=`. Any other operator gives `False`.

### `brainvis.subset`

- `SubsetRoisEditor(rois)`: holds two name lists, `in_range` and
  `out_of_range`.
  - `move_out(indices)` and `move_in(indices)`: move entries between the lists.
  - `apply()`: sets the ROI order from `in_range` and returns that order.

### `brainvis.thresholds`

- `Thresholds(min_value, lower, upper, max_value, range_type="between")`: the
  range type is either `"between"` or `"outside"`.
  - `drag_lower(x)` and `drag_upper(x)`: map a slider position to a value.
    The lower threshold never passes the upper one.
- `slider_value(x, slider_start, slider_width, min_value, max_value)`.
- `parse_thresholds(thres_min, lower, upper, thres_max)`: parses four strings.
  It raises `ValueError` if a value is not a number or if the values are not in
  ascending order.
- `point_in_polygon(point, polygon)`: an even-odd test for a point inside a
  polygon.

## Example

```python
from brainvis.roi import Rois
from brainvis.scanned_dataset import ScannedDataset

rois = Rois("data/roi/rois.csv")
print(len(rois), rois.count_ranked())

dataset = ScannedDataset("data/scanned_data/")
dataset.set_selected = None  # selection is set per item:
for item in dataset:
    item.selected = True
print(dataset.average_matrix())
```

## What this package does not do

This package is a library only. It has no windows or drawing, so there is no
matrix view, brain graph view or comparison view. It does not load brain
meshes, and it does not compute dimensionality reduction (MDS), clustering or
community detection. It provides no command-line program.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```