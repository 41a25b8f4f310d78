import pytest

from matrixmatch import Matrix, OutOfBoundsError, format_matrix, load_matrix, matrix_size_from_file, save_matrix


def test_load_semicolon_file(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("7;53;183\n497;383;563\n")
    m = load_matrix(path)
    assert m.dimensions() == (3, 2)
    assert m.tolist() == [[7, 53, 183], [497, 383, 563]]
    assert matrix_size_from_file(path) == (3, 2)


def test_blank_lines_and_spaces_are_ignored(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("1; 2\n\n -3 ;4\n\n")
    assert load_matrix(path).tolist() == [[1, 2], [-3, 4]]


def test_row_width_mismatch(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("1;2;3\n4;5\n")
    with pytest.raises(OutOfBoundsError):
        load_matrix(path)


def test_non_integer_cell(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("1;2\n3;x\n")
    with pytest.raises(ValueError, match="Line 2"):
        load_matrix(path)


def test_empty_file(tmp_path):
    path = tmp_path / "m.txt"
    path.write_text("\n")
    with pytest.raises(ValueError):
        load_matrix(path)


def test_save_then_load(tmp_path):
    m = Matrix.from_rows([[1, -2], [30, 4]])
    path = save_matrix(m, tmp_path / "out.txt")
    assert path.read_text() == "1;-2\n30;4\n"
    assert load_matrix(path) == m


def test_format_matrix_aligns_cells():
    assert format_matrix(Matrix.from_rows([[1, 200], [-3, 4]])) == "  1 200\n -3   4"
