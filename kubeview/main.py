"""Command-line entry point for KubeView."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from kubeview.app import KubeViewApp
from kubeview.constants import APP_TITLE
from kubeview.models.state import AppSettings, ConfigLoadError, ConfigManager
from kubeview.utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubeview",
        description=f"{APP_TITLE} - read-only terminal dashboard for Kubernetes pods and services",
    )
    parser.add_argument("--kubeconfig", help="Path to the kubeconfig file (overrides KUBECONFIG)")
    parser.add_argument("--context", help="Kubernetes context to use instead of current-context")
    parser.add_argument("-n", "--namespace", help="Namespace shown at startup")
    parser.add_argument("--config", help="Settings file (YAML)")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--log-level", help="Log level: DEBUG|INFO|WARNING|ERROR")
    parser.add_argument(
        "--fetch-timeout",
        type=float,
        help="Give up on any cluster fetch after this many seconds",
    )
    return parser


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Return a copy of ``settings`` with the command-line flags applied."""
    update: dict[str, Any] = {}
    for field in ("kubeconfig", "context", "namespace", "log_file", "log_level"):
        value = getattr(args, field)
        if value:
            update[field] = value
    if args.fetch_timeout is not None:
        if args.fetch_timeout <= 0:
            raise ConfigLoadError("--fetch-timeout must be greater than 0")
        update["fetch_timeout_seconds"] = args.fetch_timeout
    return settings.model_copy(update=update) if update else settings


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = apply_overrides(ConfigManager.load(args.config), args)
    except ConfigLoadError as exc:
        print(f"kubeview: {exc}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level, settings.log_file or None)
    logger.info("Starting %s in namespace %s", APP_TITLE, settings.namespace)

    app = KubeViewApp(settings)
    try:
        app.run()
    except Exception:
        logger.exception("%s terminated with an error", APP_TITLE)
        return 1
    return app.return_code or 0


if __name__ == "__main__":
    raise SystemExit(main())
