"""Exceptions raised by cluster controllers."""


class ClusterError(Exception):
    """Base exception for cluster read failures."""


class ClusterConnectionError(ClusterError):
    """Raised when the cluster client cannot be set up."""


class KubeconfigError(ClusterError):
    """Raised when the kubeconfig file is missing or malformed."""


class KubectlError(ClusterError):
    """Raised when a kubectl command fails or returns unusable output."""
