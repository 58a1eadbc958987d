"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from kubeview.constants.defaults import (
    LOG_LEVEL_DEFAULT,
    STYLE_ERROR_DEFAULT,
    STYLE_HEADER_DEFAULT,
    STYLE_HELP_DEFAULT,
    STYLE_ITEM_DEFAULT,
    STYLE_SELECTED_ITEM_DEFAULT,
    STYLE_STATUS_DEFAULT,
    STYLE_SUCCESS_DEFAULT,
    STYLE_TABLE_HEADER_DEFAULT,
    STYLE_TITLE_DEFAULT,
    STYLE_WARNING_DEFAULT,
)
from kubeview.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    SPINNER_INTERVAL,
)
from kubeview.constants.values import DEFAULT_NAMESPACE


class DashboardStyles(BaseModel):
    """Rich style strings handed to the dashboard presenter."""

    model_config = ConfigDict(frozen=True)

    title: str = STYLE_TITLE_DEFAULT
    item: str = STYLE_ITEM_DEFAULT
    selected_item: str = STYLE_SELECTED_ITEM_DEFAULT
    status: str = STYLE_STATUS_DEFAULT
    help: str = STYLE_HELP_DEFAULT
    error: str = STYLE_ERROR_DEFAULT
    table_header: str = STYLE_TABLE_HEADER_DEFAULT
    success: str = STYLE_SUCCESS_DEFAULT
    warning: str = STYLE_WARNING_DEFAULT
    header: str = STYLE_HEADER_DEFAULT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Cluster access
    kubeconfig: str = ""
    context: str = ""
    namespace: str = DEFAULT_NAMESPACE

    # kubectl timeouts
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT
    command_timeout_seconds: int = Field(default=KUBECTL_COMMAND_TIMEOUT, ge=1)

    # Extension: bound every fetch; None keeps fetches unbounded
    fetch_timeout_seconds: float | None = Field(default=None, gt=0)

    # UI preferences
    spinner_interval: float = Field(default=SPINNER_INTERVAL, gt=0)
    styles: DashboardStyles = Field(default_factory=DashboardStyles)

    # Logging
    log_file: str = ""
    log_level: str = LOG_LEVEL_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
