import logging
import json
import os
from typing import Dict, Optional
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, ValidationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class TimeoutConfig(BaseModel):
    """Ambient timeout settings of the driver binding"""
    driver_default_ms: int = Field(30000, ge=0, description="Timeout restored when a zero wait is requested (ms)")


class AssertionConfig(BaseModel):
    """Value assertion settings"""
    poll_interval_ms: int = Field(100, ge=1, description="Delay between assertion retries inside a period (ms)")


class MonitorConfig(BaseModel):
    """Monitoring configuration"""
    log_success: bool = Field(False, description="Log successful calls at INFO instead of DEBUG")
    log_level: str = Field("INFO", description="Level used by configure_logging")
    metrics_enabled: bool = Field(True, description="Collect per-operation metrics")
    error_reporting_enabled: bool = Field(True, description="Keep a history of failed calls")
    max_stored_errors: int = Field(100, ge=1, description="Failures kept by the error reporter")
    repeated_error_threshold: int = Field(5, ge=2, description="Consecutive failures of one type before warning")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        v = v.upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return v


class Config(BaseModel):
    """Main configuration"""
    timeouts: TimeoutConfig = Field(default_factory=TimeoutConfig)
    assertions: AssertionConfig = Field(default_factory=AssertionConfig)
    monitor: MonitorConfig = Field(default_factory=MonitorConfig)


class ConfigManager:
    """Configuration manager for loading and managing library settings"""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file
        self.config = Config()
        self._load_config()

    def _load_config(self):
        """Load configuration from file"""
        if not self.config_file:
            return
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r') as f:
                    config_data = json.load(f)
                self.config = Config.model_validate(config_data)
            else:
                logger.info(f"Config file {self.config_file} not found, using defaults")
                self.config = Config()
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise ValidationError.from_exception_data("Config", [{
                "type": "value_error",
                "loc": ("config_file",),
                "input": self.config_file,
                "ctx": {"error": f"Invalid JSON in config file: {e}"},
            }])
        except ValidationError as e:
            logger.error(f"Invalid configuration: {e}")
            raise

    def update_config(self, updates: Dict) -> None:
        """Update configuration with new values"""
        try:
            current_config = self.config.model_dump()
            updated_config = self._deep_merge(current_config, updates)
            self.config = Config.model_validate(updated_config)
            if self.config_file:
                self.save_config()
        except ValidationError as e:
            logger.error(f"Failed to update config: {e}")
            raise

    def _deep_merge(self, d1: Dict, d2: Dict) -> Dict:
        """Deep merge two dictionaries"""
        result = d1.copy()
        for key, value in d2.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def save_config(self):
        """Save current configuration to file"""
        if not self.config_file:
            raise ValueError("No config file to save to")
        directory = os.path.dirname(self.config_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.config_file, 'w') as f:
            json.dump(self.config.model_dump(), f, indent=2)
        logger.info(f"Configuration saved to {self.config_file}")

    def get_config(self) -> Config:
        """Get current configuration"""
        return self.config

    def validate_config(self) -> bool:
        """Validate configuration"""
        Config(**self.config.model_dump())
        return True

    def reset_config(self):
        """Reset configuration to defaults"""
        self.config = Config()
        if self.config_file:
            self.save_config()
        logger.info("Configuration reset to defaults")

    def load_environment_config(self) -> bool:
        """Load configuration from environment variables (and a .env file)"""
        load_dotenv()
        env_updates: Dict[str, Dict] = {}

        if os.getenv("FLUENT_DRIVER_DEFAULT_MS"):
            env_updates["timeouts"] = {"driver_default_ms": int(os.getenv("FLUENT_DRIVER_DEFAULT_MS"))}
        if os.getenv("FLUENT_POLL_INTERVAL_MS"):
            env_updates["assertions"] = {"poll_interval_ms": int(os.getenv("FLUENT_POLL_INTERVAL_MS"))}

        monitor_updates = {}
        if os.getenv("FLUENT_LOG_LEVEL"):
            monitor_updates["log_level"] = os.getenv("FLUENT_LOG_LEVEL")
        if os.getenv("FLUENT_LOG_SUCCESS"):
            monitor_updates["log_success"] = os.getenv("FLUENT_LOG_SUCCESS").lower() in ("1", "true", "yes")
        if monitor_updates:
            env_updates["monitor"] = monitor_updates

        if env_updates:
            self.update_config(env_updates)
            return True
        return False


def configure_logging(config: Optional[Config] = None):
    """Configure root logging the way the library reports calls"""
    level = (config or Config()).monitor.log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
