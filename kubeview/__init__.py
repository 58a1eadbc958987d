"""KubeView - read-only terminal dashboard for Kubernetes pods and services."""

__version__ = "0.1.0"
