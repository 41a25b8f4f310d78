"""Text loader for weight matrices.

One row per line, cells separated by ``;``::

    7;53;183;439
    497;383;563;79

The first line fixes the width (separators + 1); the number of non-blank
lines fixes the height. A row of any other width is rejected.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .errors import OutOfBoundsError
from .matrix import Matrix


ELEMENT_SEPARATOR = ";"


def _read_lines(path: Path) -> List[str]:
    lines = [line.strip() for line in path.read_text().splitlines()]
    return [line for line in lines if line]


def matrix_size_from_file(path: str | Path) -> tuple[int, int]:
    """Return (width, height) of the matrix stored in `path`."""

    path = Path(path)
    lines = _read_lines(path)
    if not lines:
        raise ValueError(f"File '{path}' is empty")
    return lines[0].count(ELEMENT_SEPARATOR) + 1, len(lines)


def load_matrix(path: str | Path) -> Matrix:
    """Parse a ``;``-separated matrix file."""

    path = Path(path)
    lines = _read_lines(path)
    if not lines:
        raise ValueError(f"File '{path}' is empty")

    width = lines[0].count(ELEMENT_SEPARATOR) + 1
    matrix = Matrix.create(width, len(lines))

    for row, line in enumerate(lines):
        cells = line.split(ELEMENT_SEPARATOR)
        if len(cells) != width:
            raise OutOfBoundsError(
                f"Line {row + 1} of '{path}' has {len(cells)} cells, expected {width}"
            )
        for col, cell in enumerate(cells):
            try:
                value = int(cell.strip())
            except ValueError as exc:
                raise ValueError(
                    f"Line {row + 1} of '{path}': cell {col + 1} is not an integer: {cell!r}"
                ) from exc
            matrix.set(row, col, value)

    return matrix


def save_matrix(matrix: Matrix, path: str | Path) -> Path:
    """Write `matrix` in the loader format."""

    path = Path(path)
    lines = [ELEMENT_SEPARATOR.join(str(v) for v in row) for row in matrix.iter_rows()]
    path.write_text("\n".join(lines) + "\n")
    return path


def format_matrix(matrix: Matrix) -> str:
    """Right-aligned text rendering."""

    rows = [[str(v) for v in row] for row in matrix.iter_rows()]
    cell = max(len(v) for row in rows for v in row)
    return "\n".join(" ".join(v.rjust(cell) for v in row) for row in rows)
