"""Screen mixins."""

from kubeview.screens.mixins.worker_mixin import WorkerMixin

__all__ = ["WorkerMixin"]
