from .config_manager import (
    Config,
    ConfigManager,
    TimeoutConfig,
    AssertionConfig,
    MonitorConfig,
    configure_logging,
)

__all__ = [
    "Config",
    "ConfigManager",
    "TimeoutConfig",
    "AssertionConfig",
    "MonitorConfig",
    "configure_logging",
]
