"""Checks on the dashboard adapter packages and their entry point."""

from importlib import import_module

import pytest


@pytest.mark.parametrize(
    "package",
    ["src.adapters.interface", "src.adapters.interface.streamlit"],
)
def test_interface_packages_export_nothing(package: str) -> None:
    module = import_module(package)

    assert module.__all__ == []
    assert module.__doc__


def test_dashboard_module_exposes_entry_point_and_periods() -> None:
    app = import_module("src.adapters.interface.streamlit.app")

    assert callable(app.main)
    assert set(app.PERIOD_LABELS.values()) == {"daily", "weekly", "monthly"}
    assert [field for _, field in app.DRE_ROWS][0] == "gross_revenue"
