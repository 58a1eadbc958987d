"""Constants module for KubeView TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
- ui.py: Frame layout constants

Note: Keyboard bindings are defined in kubeview.keyboard module.
"""

from kubeview.constants.defaults import (
    CONFIG_ENV_VAR,
    LOG_LEVEL_DEFAULT,
)
from kubeview.constants.enums import (
    ContainerState,
    InputKind,
    PodPhase,
    ViewType,
)
from kubeview.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    SPINNER_INTERVAL,
)
from kubeview.constants.values import (
    APP_TITLE,
    DEFAULT_NAMESPACE,
    UNKNOWN_CONTEXT,
)

__all__ = [
    "APP_TITLE",
    "CLUSTER_REQUEST_TIMEOUT",
    "CONFIG_ENV_VAR",
    "DEFAULT_NAMESPACE",
    "KUBECTL_COMMAND_TIMEOUT",
    "LOG_LEVEL_DEFAULT",
    "SPINNER_INTERVAL",
    "UNKNOWN_CONTEXT",
    "ContainerState",
    "InputKind",
    "PodPhase",
    "ViewType",
]
