"""Tests for loading series and saving matrices."""

import json
import math

import numpy as np
import pytest

from elasticdist.io import load_series, save_matrix


class TestLoadSeries:
    """Reading ragged collections."""

    def test_ragged_csv(self, tmp_path):
        path = tmp_path / "series.csv"
        path.write_text("1,2,3\n\n4,5\n6,7,8,9\n")
        series = load_series(path)
        assert [len(s) for s in series] == [3, 2, 4]
        assert series[1][1] == 5.0

    def test_whitespace_txt(self, tmp_path):
        path = tmp_path / "series.txt"
        path.write_text("1 2 3\n4 5\n")
        series = load_series(path)
        assert [list(s) for s in series] == [[1.0, 2.0, 3.0], [4.0, 5.0]]

    def test_npy(self, tmp_path):
        path = tmp_path / "series.npy"
        X = np.random.randn(3, 6)
        np.save(path, X)
        series = load_series(path)
        assert len(series) == 3
        assert np.array_equal(series[2], X[2])

    def test_bad_value(self, tmp_path):
        path = tmp_path / "series.csv"
        path.write_text("1,2\n3,abc\n")
        with pytest.raises(ValueError, match=":2:"):
            load_series(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "series.csv"
        path.write_text("\n")
        with pytest.raises(ValueError):
            load_series(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_series(tmp_path / "nope.csv")


class TestSaveMatrix:
    """Writing matrices with unreachable entries."""

    D = np.array([[0.0, math.inf], [1.5, 0.0]])

    def test_json_keeps_inf(self, tmp_path):
        path = save_matrix(self.D, tmp_path / "D.json")
        assert "Infinity" in path.read_text()
        assert json.loads(path.read_text())[0][1] == math.inf

    def test_csv(self, tmp_path):
        path = save_matrix(self.D, tmp_path / "D.csv")
        loaded = np.loadtxt(path, delimiter=",")
        assert np.array_equal(loaded, self.D)

    def test_npy_explicit_format(self, tmp_path):
        path = save_matrix(self.D, tmp_path / "D.bin", format="npy")
        assert path.name == "D.bin"
        assert np.array_equal(np.load(path), self.D)

    def test_creates_parent(self, tmp_path):
        path = save_matrix(self.D, tmp_path / "nested" / "D.npy")
        assert path.exists()

    def test_no_overwrite(self, tmp_path):
        path = save_matrix(self.D, tmp_path / "D.npy")
        with pytest.raises(FileExistsError):
            save_matrix(self.D, path, overwrite=False)
