"""Sanity tests ensuring the package imports correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "ginrummy",
        "ginrummy.cards",
        "ginrummy.counter",
        "ginrummy.encoding",
        "ginrummy.melds",
        "ginrummy.render",
        "ginrummy.utils",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all modules can be imported."""

    assert importlib.import_module(module_name)
