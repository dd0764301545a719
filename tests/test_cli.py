"""Tests for the mtx-layout command line."""

import json

import pytest

from conftest import GENERAL_REAL, RAGGED_REAL
from mtx_layout.config import reload_defaults
from mtx_layout.config.yaml_loader import DEFAULTS_ENV_VAR
from mtx_layout.cli import (
    EXIT_FORMAT_ERROR,
    EXIT_INVALID_ARGUMENT,
    EXIT_IO_ERROR,
    EXIT_OK,
    main,
)


class TestGraphCommand:
    def test_writes_graph_json(self, write_mtx, capsys):
        path = write_mtx(GENERAL_REAL)

        assert main(["graph", "-m", str(path)]) == EXIT_OK

        graph = json.loads(capsys.readouterr().out)
        assert graph["nodes"] == [{"id": 0}, {"id": 1}, {"id": 2}]
        assert graph["edges"][1] == {"source": 1, "target": 0}

    def test_missing_file(self, tmp_path, capsys):
        code = main(["graph", "-m", str(tmp_path / "missing.mtx")])

        assert code == EXIT_IO_ERROR
        assert capsys.readouterr().out == ""

    def test_malformed_file(self, write_mtx, capsys):
        path = write_mtx("%%MatrixMarket matrix coordinate real general\n2 2\n")

        assert main(["graph", "-m", str(path)]) == EXIT_FORMAT_ERROR
        assert capsys.readouterr().out == ""

    def test_non_utf8_comment(self, tmp_path, capsys):
        path = tmp_path / "latin1.mtx"
        path.write_bytes(
            b"%%MatrixMarket matrix coordinate real general\n"
            b"% author: M\xfcller\n"
            b"2 2 1\n"
            b"2 1 5.0\n"
        )

        assert main(["graph", "-m", str(path)]) == EXIT_OK
        assert json.loads(capsys.readouterr().out)["edges"] == [{"source": 1, "target": 0}]

    def test_unsupported_type(self, write_mtx):
        path = write_mtx("%%MatrixMarket matrix array real general\n2 2\n1.0\n2.0\n3.0\n4.0\n")

        assert main(["graph", "-m", str(path)]) == EXIT_FORMAT_ERROR


class TestInfoCommand:
    def test_prints_statistics(self, write_mtx, capsys):
        path = write_mtx(RAGGED_REAL)

        assert main(["info", "-m", str(path)]) == EXIT_OK

        out = capsys.readouterr().out
        assert "3 x 5" in out
        assert "row length max:  4" in out
        assert "row length min:  0" in out
        assert "row length mean: 2" in out


class TestLayoutCommand:
    def test_summary(self, write_mtx, capsys):
        path = write_mtx(GENERAL_REAL)

        code = main(["layout", "-m", str(path), "--modulo", "4", "--show-rows", "2"])
        assert code == EXIT_OK

        out = capsys.readouterr().out
        assert "padded length:   4 (modulo 4)" in out
        assert "row 0: columns=[0, 1, -1, -1] values=[1.0, 3.0, 0.0, 0.0]" in out
        assert "row 1: columns=[0, -1, -1, -1] values=[2.0, 0.0, 0.0, 0.0]" in out

    def test_element_type(self, write_mtx, capsys):
        path = write_mtx(RAGGED_REAL)

        code = main([
            "layout", "-m", str(path), "--element-type", "int32",
            "--modulo", "4", "--zero", "-1", "--show-rows", "1",
        ])
        assert code == EXIT_OK

        out = capsys.readouterr().out
        assert "element type:    int32" in out
        assert "row 0: columns=[0, 1, 1, 4, -1, -1, -1, -1] values=[-1, -2, 9, 2, -1, -1, -1, -1]" in out

    def test_invalid_modulo(self, write_mtx, capsys):
        path = write_mtx(GENERAL_REAL)

        assert main(["layout", "-m", str(path), "--modulo", "0"]) == EXIT_INVALID_ARGUMENT
        assert capsys.readouterr().out == ""

    def test_unusable_defaults_file(self, write_mtx, tmp_path, monkeypatch, capsys):
        path = write_mtx(GENERAL_REAL)
        defaults = tmp_path / "defaults.yaml"
        defaults.write_text("layout:\n  element_type: float16\n", encoding="utf-8")
        monkeypatch.setenv(DEFAULTS_ENV_VAR, str(defaults))
        reload_defaults()
        try:
            assert main(["layout", "-m", str(path)]) == EXIT_INVALID_ARGUMENT
            assert capsys.readouterr().out == ""
        finally:
            monkeypatch.delenv(DEFAULTS_ENV_VAR)
            reload_defaults()

    def test_unknown_element_type_rejected_by_argparse(self, write_mtx):
        path = write_mtx(GENERAL_REAL)

        with pytest.raises(SystemExit):
            main(["layout", "-m", str(path), "--element-type", "complex"])


class TestPlotCommand:
    def test_saves_images(self, write_mtx, tmp_path):
        path = write_mtx(RAGGED_REAL)
        image = tmp_path / "pattern.png"
        histogram = tmp_path / "hist.png"

        code = main(["plot", "-m", str(path), "-o", str(image), "--histogram", str(histogram)])

        assert code == EXIT_OK
        assert image.exists()
        assert histogram.exists()


def test_no_command(capsys):
    assert main([]) == EXIT_INVALID_ARGUMENT
    assert capsys.readouterr().out == ""
