"""Kubeconfig discovery and parsing."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from kubeview.constants.values import KUBECONFIG_ENV_VAR
from kubeview.controllers.base.errors import KubeconfigError


def resolve_kubeconfig_path(
    override: str | Path | None = None,
    environ: dict[str, str] | None = None,
) -> Path:
    """Pick the kubeconfig file: explicit override, then $KUBECONFIG, then ~/.kube/config.

    Only the first entry of a multi-path $KUBECONFIG is used.
    """
    if override:
        return Path(override).expanduser()
    env = os.environ if environ is None else environ
    for entry in env.get(KUBECONFIG_ENV_VAR, "").split(os.pathsep):
        if entry.strip():
            return Path(entry.strip()).expanduser()
    return Path.home() / ".kube" / "config"


def load_kubeconfig(path: Path) -> dict[str, Any]:
    """Read and validate a kubeconfig file.

    Raises:
        KubeconfigError: The file is missing, unreadable, not YAML, or lacks
            the ``clusters`` and ``contexts`` lists.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise KubeconfigError(f"kubeconfig not found: {path}") from exc
    except OSError as exc:
        raise KubeconfigError(f"cannot read kubeconfig {path}: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise KubeconfigError(f"invalid kubeconfig {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise KubeconfigError(f"invalid kubeconfig {path}: expected a mapping")
    for key in ("clusters", "contexts"):
        if not isinstance(data.get(key), list) or not data[key]:
            raise KubeconfigError(f"invalid kubeconfig {path}: no {key} defined")
    return data


def context_names(config: dict[str, Any]) -> list[str]:
    """Return the context names defined in a parsed kubeconfig."""
    return [
        str(entry.get("name"))
        for entry in config.get("contexts") or []
        if isinstance(entry, dict) and entry.get("name")
    ]


def current_context(config: dict[str, Any]) -> str:
    """Return the ``current-context`` of a parsed kubeconfig.

    Raises:
        KubeconfigError: No current context is set.
    """
    name = str(config.get("current-context") or "").strip()
    if not name:
        raise KubeconfigError("current-context is not set")
    return name
