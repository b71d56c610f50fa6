import numpy as np
import pytest

from earzone.core.io import load_polygon, save_polygon, write_vtk
from earzone.core.shapes import random_star_polygon, l_shape
from earzone.core.triangulate import triangulate_polygon


def test_save_and_load_polygon(tmp_path):
    pts = random_star_polygon(25, seed=1)
    path = tmp_path / "star.txt"
    save_polygon(str(path), pts, header="star polygon")
    text = path.read_text()
    assert text.startswith("# star polygon")
    loaded = load_polygon(str(path))
    assert np.array_equal(loaded, pts)


def test_load_polygon_skips_comments(tmp_path):
    path = tmp_path / "l.txt"
    path.write_text("# L shape\n0 0\n2 0\n2 1\n1 1  # reflex\n1 2\n0 2\n")
    assert np.array_equal(load_polygon(str(path)), l_shape())


def test_load_polygon_errors(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("# nothing here\n")
    with pytest.raises(ValueError):
        load_polygon(str(empty))
    three = tmp_path / "xyz.txt"
    three.write_text("0 0 0\n1 0 0\n0 1 0\n")
    with pytest.raises(ValueError):
        load_polygon(str(three))
    with pytest.raises(FileNotFoundError):
        load_polygon(str(tmp_path / "missing.txt"))


def test_write_vtk_layout(tmp_path):
    pts = l_shape()
    tris = triangulate_polygon(pts)
    path = tmp_path / "l.vtk"
    write_vtk(str(path), pts, tris, point_data={'id': np.arange(6)},
              cell_data={'tri': np.arange(4)})
    lines = path.read_text().splitlines()
    assert lines[0] == "# vtk DataFile Version 2.0"
    assert "DATASET UNSTRUCTURED_GRID" in lines
    assert "POINTS 6 double" in lines
    assert "CELLS 4 16" in lines
    assert "CELL_TYPES 4" in lines
    assert "POINT_DATA 6" in lines
    assert "CELL_DATA 4" in lines
    cells = [l for l in lines if l.startswith("3 ")]
    assert len(cells) == 4
    assert cells[0].split() == ["3"] + [str(int(v)) for v in tris[0]]
    assert lines[lines.index("POINTS 6 double") + 2].split() == ["2.0000000000000000e+00", "0.0000000000000000e+00", "0.0000000000000000e+00"]


def test_write_vtk_accepts_flat_buffer(tmp_path):
    pts = l_shape()
    flat = triangulate_polygon(pts).ravel()
    path = tmp_path / "flat.vtk"
    write_vtk(str(path), pts, flat)
    assert "CELLS 4 16" in path.read_text()


def test_write_vtk_rejects_bad_shapes(tmp_path):
    with pytest.raises(ValueError):
        write_vtk(str(tmp_path / "a.vtk"), np.zeros((4, 4)), np.zeros((1, 3), dtype=int))
    with pytest.raises(ValueError):
        write_vtk(str(tmp_path / "b.vtk"), np.zeros((4, 2)), np.zeros((2, 4), dtype=int))
