# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for the top-level package surface."""

import logging

import pytest

import chromaform
from chromaform import Color, ColorError, InvalidColorError, UnsupportedOptionError


class TestExports:
    def test_all_names_resolve(self):
        for name in chromaform.__all__:
            assert hasattr(chromaform, name), name

    def test_version(self):
        assert chromaform.__version__ == "1.0.0"

    def test_quick_start(self):
        c = Color("#6699cc")
        assert c.brighten(10).to_hsl().l == pytest.approx(70.0, abs=0.5)
        assert len(c.create_gradient_to("tomato", stops=5)) == 5
        assert c.get_contrast_ratio("white") > 1.0


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(InvalidColorError, ColorError)
        assert issubclass(UnsupportedOptionError, ColorError)
        assert issubclass(ColorError, ValueError)

    def test_unsupported_option_details(self):
        err = UnsupportedOptionError("blend mode", "dodge")
        assert err.kind == "blend mode"
        assert err.value == "dodge"
        assert str(err) == "Unsupported blend mode: dodge"


class TestLogging:
    def test_library_logger_has_null_handler(self):
        handlers = logging.getLogger("chromaform").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
