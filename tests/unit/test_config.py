# -*- coding: utf-8 -*-
"""
tests/unit/test_config.py

Tests for configuration, rendering, logging and the command line.
"""
import logging

import pytest
import sympy

from nilmatrix.__main__ import main
from nilmatrix.config import load_config
from nilmatrix.core.base import ConfigError
from nilmatrix.log import get_logger
from nilmatrix.render import horizontal, render_expr, render_set


class TestLoadConfig:

    def test_defaults(self):
        cfg = load_config()
        assert cfg.catalog == "nonnice7"
        assert cfg.style == "latex"
        assert not cfg.show_derivations
        assert cfg.only is None

    def test_dotlist(self):
        cfg = load_config(["catalog=gong7", "style=plain", "show_derivations=true"])
        assert cfg.catalog == "gong7"
        assert cfg.style == "plain"
        assert cfg.show_derivations is True

    def test_ad_hoc_algebra(self):
        cfg = load_config(["structure_constants=0,0,12,[lambda]*13", "parameters=[lambda]"])
        assert cfg.structure_constants == "0,0,12,[lambda]*13"
        assert list(cfg.parameters) == ["lambda"]

    @pytest.mark.parametrize("argv", [
        ["style=html"],
        ["colour=blue"],
        ["parameters=[lambda]"],
        ["log_level=LOUD"],
        ["show_derivations=maybe"],
    ])
    def test_invalid(self, argv):
        with pytest.raises(ConfigError):
            load_config(argv)


class TestRender:

    def test_styles(self):
        x = sympy.Rational(1, 2)
        assert render_expr(x, 'plain') == "1/2"
        assert render_expr(x, 'latex') == r"\frac{1}{2}"
        with pytest.raises(ValueError):
            render_expr(x, 'html')

    def test_matrix_on_one_line(self):
        assert render_expr(sympy.Matrix([[1, 2], [3, 4]]), 'plain') == "[[1, 2], [3, 4]]"

    def test_horizontal(self):
        assert horizontal([1, 2, 3], 'plain') == "(1, 2, 3)"

    def test_set_is_sorted(self):
        a, b = sympy.symbols("a b")
        assert render_set({b, a}, 'plain') == "{a, b}"
        assert render_set([b, a], 'latex') == r"\{a, b\}"
        assert render_set([], 'plain') == "{}"

    def test_dummies_shown_by_name(self):
        w1, d3 = sympy.Dummy("w1"), sympy.Dummy("d3")
        assert render_expr(3 * w1, 'plain') == "3*w1"
        assert render_expr(sympy.Matrix([[-w1, 0], [0, d3]]), 'plain') == "[[-w1, 0], [0, d3]]"
        assert render_set({w1 * d3}, 'plain') == "{d3*w1}"
        assert render_expr(w1, 'latex') == sympy.latex(sympy.Symbol("w1"))


class TestLogging:

    def test_hierarchy(self):
        assert get_logger("study").name == "nilmatrix.study"
        assert get_logger("nilmatrix.core").name == "nilmatrix.core"
        assert isinstance(get_logger("x"), logging.Logger)


class TestMain:

    def test_ad_hoc_algebra(self, capsys):
        assert main(["structure_constants=0,0,12", "style=plain"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[:4] == [
            "0,0,12",
            "Lie algebra: (0, 0, 12)",
            "Nikolayevsky derivation: (2/3, 2/3, 4/3)",
            "centralizer contained in space of dimension 0",
        ]

    def test_bad_algebra(self, capsys):
        assert main(["structure_constants=0,0,14"]) == 1
        assert capsys.readouterr().out == ""

    def test_non_polynomial_algebra(self, capsys):
        argv = ["structure_constants=0,0,12,[1/lambda]*13", "parameters=[lambda]"]
        assert main(argv) == 1
        assert capsys.readouterr().out == ""

    def test_bad_config(self):
        assert main(["style=html"]) == 2

    def test_unknown_catalog(self):
        assert main(["catalog=dimension8"]) == 2

    def test_unknown_entry(self):
        assert main(["catalog=nonnice7", "only=missing"]) == 2
