"""Tests for BaseController."""

from __future__ import annotations

import pytest

from kubeview.controllers.base import BaseController, KubectlError


class TestBaseController:
    """Tests for the abstract gateway contract."""

    def test_cannot_instantiate(self) -> None:
        with pytest.raises(TypeError):
            BaseController()  # type: ignore[abstract]

    @pytest.mark.asyncio
    async def test_fetch_all_combines_pods_and_services(self, gateway) -> None:
        data = await gateway.fetch_all("default")
        assert [pod.name for pod in data.pods] == ["web-1", "web-2"]
        assert [svc.name for svc in data.services] == ["web"]

    @pytest.mark.asyncio
    async def test_fetch_all_skips_services_when_pods_fail(self, make_gateway) -> None:
        gateway = make_gateway(failures={"pods": "forbidden"})
        with pytest.raises(KubectlError):
            await gateway.fetch_all("default")
        assert gateway.calls == [("pods", "default")]

    @pytest.mark.asyncio
    async def test_fetch_all_has_no_partial_result(self, make_gateway, make_pod) -> None:
        gateway = make_gateway(
            pods={"default": [make_pod("a")]}, failures={"services": "timeout"}
        )
        with pytest.raises(KubectlError, match="timeout"):
            await gateway.fetch_all("default")
