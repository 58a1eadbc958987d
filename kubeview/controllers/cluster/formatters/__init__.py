"""Detail text formatters for cluster controller."""

from kubeview.controllers.cluster.formatters.pod_detail_formatter import PodDetailFormatter
from kubeview.controllers.cluster.formatters.service_detail_formatter import (
    ServiceDetailFormatter,
)

__all__ = ["PodDetailFormatter", "ServiceDetailFormatter"]
