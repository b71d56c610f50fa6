"""Lightweight polygon and triangulation file I/O.

- load_polygon / save_polygon: plain text, one ``x y`` vertex per line,
  ``#`` starts a comment.
- write_vtk: legacy VTK export of a triangulation for ParaView/VisIt.

Triangulations use the package's canonical layout:
    points: (N, 2) float64 array
    triangles: (M, 3) integer array (0-indexed)
"""
from __future__ import annotations
import numpy as np
from typing import Optional, Dict
import warnings


def load_polygon(filepath: str) -> np.ndarray:
    """Read polygon vertices from a whitespace separated text file.

    Raises
    ------
    ValueError
        If the file holds no vertices or rows do not have two columns.
    FileNotFoundError
        If the file doesn't exist.
    """
    with warnings.catch_warnings():
        # loadtxt warns on empty input; reported as ValueError below
        warnings.simplefilter('ignore', UserWarning)
        data = np.loadtxt(filepath, comments='#', dtype=np.float64, ndmin=2)
    if data.size == 0:
        raise ValueError(f"No vertices in {filepath}")
    if data.shape[1] != 2:
        raise ValueError(f"Expected 2 columns (x y) in {filepath}, got {data.shape[1]}")
    return data


def save_polygon(filepath: str, points, header: Optional[str] = None) -> None:
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    np.savetxt(filepath, pts, fmt='%.17g', header=header or '', comments='# ')


def _write_field(f, name, data):
    data = np.asarray(data)
    if data.ndim == 1:
        f.write(f"SCALARS {name} double 1\n")
        f.write("LOOKUP_TABLE default\n")
        np.savetxt(f, data.astype(np.float64), fmt="%.16e")
    elif data.ndim == 2 and data.shape[1] in (2, 3):
        if data.shape[1] == 2:
            data = np.column_stack([data, np.zeros(len(data))])
        f.write(f"VECTORS {name} double\n")
        np.savetxt(f, data.astype(np.float64), fmt="%.16e")
    else:
        warnings.warn(f"Skipping field '{name}' with unsupported shape {data.shape}")


def write_vtk(filepath: str, points, triangles,
              point_data: Optional[Dict[str, np.ndarray]] = None,
              cell_data: Optional[Dict[str, np.ndarray]] = None,
              title: str = "earzone triangulation") -> None:
    """Write a triangulation as an ASCII legacy VTK unstructured grid.

    ``triangles`` may be the ``(M, 3)`` rows or the flat index buffer filled
    by ``triangulate`` (trimmed to ``3 * count`` slots). 2-D points get z=0.
    """
    pts = np.asarray(points, dtype=np.float64)
    tris = np.asarray(triangles, dtype=np.int64)
    if tris.ndim == 1:
        tris = tris.reshape(-1, 3)
    if pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise ValueError(f"points must be (N, 2) or (N, 3), got shape {pts.shape}")
    if tris.ndim != 2 or tris.shape[1] != 3:
        raise ValueError(f"triangles must be (M, 3), got shape {tris.shape}")
    if pts.shape[1] == 2:
        pts = np.column_stack([pts, np.zeros(len(pts))])
    m = len(tris)

    with open(filepath, 'w') as f:
        f.write(f"# vtk DataFile Version 2.0\n{title}\nASCII\nDATASET UNSTRUCTURED_GRID\n")
        f.write(f"POINTS {len(pts)} double\n")
        np.savetxt(f, pts, fmt='%.16e')
        # each cell row: vertex count, then the indices
        f.write(f"\nCELLS {m} {4 * m}\n")
        np.savetxt(f, np.column_stack([np.full(m, 3), tris]), fmt='%d')
        # 5 = VTK_TRIANGLE
        f.write(f"\nCELL_TYPES {m}\n")
        np.savetxt(f, np.full(m, 5), fmt='%d')
        for section, count, fields in (("POINT_DATA", len(pts), point_data),
                                       ("CELL_DATA", m, cell_data)):
            if fields:
                f.write(f"\n{section} {count}\n")
                for name, data in fields.items():
                    _write_field(f, name, data)


__all__ = ['load_polygon', 'save_polygon', 'write_vtk']
