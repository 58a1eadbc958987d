"""Tests for package layout and public imports.

Marked with:
- @pytest.mark.unit: Marks as unit test
- @pytest.mark.fast: Marks as fast test (<100ms)
"""

from __future__ import annotations

import importlib

import pytest

PACKAGES = [
    "kubeview.constants",
    "kubeview.controllers",
    "kubeview.controllers.base",
    "kubeview.controllers.cluster",
    "kubeview.controllers.cluster.fetchers",
    "kubeview.controllers.cluster.formatters",
    "kubeview.controllers.cluster.parsers",
    "kubeview.engine",
    "kubeview.keyboard",
    "kubeview.models",
    "kubeview.models.core",
    "kubeview.models.state",
    "kubeview.screens",
    "kubeview.screens.dashboard",
    "kubeview.screens.mixins",
    "kubeview.utils",
    "kubeview.widgets",
]


@pytest.mark.unit
@pytest.mark.fast
class TestPackageExports:
    """Every name listed in a package's __all__ must be importable from it."""

    @pytest.mark.parametrize("package", PACKAGES)
    def test_all_names_resolve(self, package: str) -> None:
        module = importlib.import_module(package)
        for name in getattr(module, "__all__", []):
            assert hasattr(module, name), f"{package} is missing {name}"


@pytest.mark.unit
@pytest.mark.fast
class TestDomainImports:
    """Tests for the imports the app relies on."""

    def test_screen_import_from_screens(self) -> None:
        from kubeview.screens import DashboardScreen

        assert DashboardScreen is not None

    def test_gateway_is_base_controller(self) -> None:
        from kubeview.controllers import BaseController, ClusterController

        assert issubclass(ClusterController, BaseController)

    def test_version(self) -> None:
        import kubeview

        assert kubeview.__version__ == "0.1.0"
