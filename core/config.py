# core/config.py
"""
Configuration Management
Loads YAML configs with environment variable overrides
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class APIConfig(BaseSettings):
    """API Server Configuration"""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = Field(default="0.0.0.0", description="API host")
    port: int = Field(default=8000, description="API port")
    prefix: str = Field(default="/api/v1", description="API PREFIX")
    cors_origins: str = Field(
        default="http://localhost:7860", description="CORS origins"
    )
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]


class LLMConfig(BaseSettings):
    """Language model provider configuration (OpenAI-compatible)"""

    model_config = SettingsConfigDict(env_prefix="OPENAI_")

    api_key: Optional[str] = Field(default=None, description="Bearer credential")
    base_url: str = Field(
        default="https://api.openai.com/v1", description="Chat completions base URL"
    )
    model: str = Field(default="gpt-4o-mini", description="Chat model")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    timeout_seconds: float = Field(default=60.0, description="HTTP timeout")

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


class AgentConfig(BaseSettings):
    """Agent loop and tool configuration"""

    model_config = SettingsConfigDict(env_prefix="AGENT_")

    default_steps: int = Field(default=6, ge=1, le=20)
    max_steps: int = Field(default=20, ge=1, le=20)
    tool_result_max_chars: int = Field(default=4000, ge=1)
    tool_timeout_seconds: float = Field(default=30.0, gt=0)
    search_max_results: int = Field(default=5, ge=1)
    user_agent: str = Field(default="Mozilla/5.0", description="User-Agent for tools")


class AppConfig:
    """Main Application Configuration"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or "configs/app.yaml"
        self.yaml_config = self._load_yaml_config()

        # Initialize component configs
        self.api = APIConfig()
        self.llm = LLMConfig()
        self.agent = AgentConfig()

    def _load_yaml_config(self) -> Dict[str, Any]:
        """Load YAML configuration file, falling back to built-in defaults"""
        config_file = Path(self.config_path)
        if not config_file.exists():
            logger.warning(f"Config file not found: {config_file}, using defaults")
            return self._default_config()

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Error loading config file {config_file}: {e}")
            return self._default_config()

    @staticmethod
    def _default_config() -> Dict[str, Any]:
        return {
            "app": {
                "name": "Web Agent Lab",
                "version": "0.1.0",
                "description": "Autonomous web research agent",
            },
            "logging": {
                "level": "INFO",
                "format": DEFAULT_LOG_FORMAT,
                "structured": False,
            },
            "features": {
                "enable_agent": True,
                "enable_docs": True,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        keys = key.split(".")
        value = self.yaml_config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def get_feature_flag(self, feature: str) -> bool:
        """Get feature flag value"""
        return self.get(f"features.enable_{feature}", True)

    def get_summary(self) -> Dict[str, Any]:
        """Get configuration summary (never includes credentials)"""
        return {
            "app": self.get("app", {}),
            "features": self.get("features", {}),
            "api": {
                "host": self.api.host,
                "port": self.api.port,
                "prefix": self.api.prefix,
                "debug": self.api.debug,
            },
            "llm": {
                "model": self.llm.model,
                "base_url": self.llm.base_url,
                "credential_configured": self.llm.has_credential,
            },
            "agent": {
                "default_steps": self.agent.default_steps,
                "max_steps": self.agent.max_steps,
                "tool_timeout_seconds": self.agent.tool_timeout_seconds,
            },
        }


# Global config instance
_app_config = None


def get_config(config_path: Optional[str] = None) -> AppConfig:
    """Get or create global configuration instance"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig(config_path)
    return _app_config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads env/YAML"""
    global _app_config
    _app_config = None


def setup_logging(config: Optional[AppConfig] = None) -> None:
    """Setup logging based on configuration"""
    if config is None:
        config = get_config()

    from .utils.logging import setup_structured_logging

    setup_structured_logging(config.get("logging", {}))


if __name__ == "__main__":
    import json

    print(json.dumps(get_config().get_summary(), indent=2))
