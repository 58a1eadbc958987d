"""Shared JSON decoding for kubectl output."""

from __future__ import annotations

import json
from typing import Any

from kubeview.controllers.base.errors import KubectlError


def decode_object(output: str, what: str) -> dict[str, Any]:
    """Decode kubectl ``-o json`` output into a mapping."""
    try:
        data = json.loads(output) if output.strip() else {}
    except json.JSONDecodeError as exc:
        raise KubectlError(f"invalid JSON returned for {what}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise KubectlError(f"unexpected JSON returned for {what}")
    return data


def decode_items(output: str, what: str) -> list[dict[str, Any]]:
    """Decode a kubectl list response into its ``items``."""
    items = decode_object(output, what).get("items") or []
    return [item for item in items if isinstance(item, dict)]
