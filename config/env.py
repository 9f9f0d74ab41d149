"""Environment variables configuration."""
import logging
import os
from typing import Dict, Optional

from dotenv import dotenv_values, find_dotenv, load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger("chatdemo.config")

NOT_SET = "NOT_SET"
DEFAULT_API_VERSION = "2024-10-21"


def load_env_file(path: Optional[str] = None, override: bool = True) -> Dict[str, str]:
    """
    Copy every variable of the local .env file into the process environment.

    Args:
        path: Explicit .env path; searched upwards from the cwd when omitted
        override: Let file values replace variables already set

    Returns:
        The variables that were read from the file
    """
    env_path = path or find_dotenv(usecwd=True)
    if not env_path or not os.path.isfile(env_path):
        logger.info("No .env file found, using process environment only")
        return {}

    values = {k: v for k, v in dotenv_values(env_path).items() if v is not None}
    load_dotenv(env_path, override=override)
    logger.info(f"Loaded {len(values)} variables from {env_path}")
    return values


ENDPOINT_VARS = ("AZURE_OPENAI_ENDPOINT", "SPRING_AI_AZURE_OPENAI_ENDPOINT")
API_KEY_VARS = ("AZURE_OPENAI_API_KEY", "AZURE_OPENAI_KEY", "SPRING_AI_AZURE_OPENAI_API_KEY")
DEPLOYMENT_VARS = (
    "AZURE_OPENAI_DEPLOYMENT_NAME",
    "AZURE_OPENAI_DEPLOYMENT",
    "SPRING_AI_AZURE_OPENAI_CHAT_OPTIONS_DEPLOYMENT_NAME",
)


def get_env(*names: str, default: Optional[str] = None) -> Optional[str]:
    """Return the first non-empty variable among names."""
    for name in names:
        value = os.getenv(name)
        if value and value.strip():
            return value.strip()
    return default


class AzureOpenAISettings(BaseModel):
    """Connection settings for the Azure OpenAI chat deployment."""

    endpoint: Optional[str] = Field(default=None, description="Azure OpenAI resource endpoint")
    api_key: Optional[str] = Field(default=None, description="Azure OpenAI API key")
    deployment_name: Optional[str] = Field(default=None, description="Chat model deployment")
    api_version: str = Field(default=DEFAULT_API_VERSION, description="REST API version")
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)

    @classmethod
    def from_env(cls) -> "AzureOpenAISettings":
        """Read the settings, raising ModelConfigurationError on invalid values."""
        from chat.errors import ModelConfigurationError

        temperature = get_env("AZURE_OPENAI_TEMPERATURE")
        try:
            return cls(
                endpoint=get_env(*ENDPOINT_VARS),
                api_key=get_env(*API_KEY_VARS),
                deployment_name=get_env(*DEPLOYMENT_VARS),
                api_version=get_env("AZURE_OPENAI_API_VERSION", default=DEFAULT_API_VERSION),
                temperature=float(temperature) if temperature else None,
            )
        except ValueError as e:
            # pydantic ValidationError is a ValueError too
            raise ModelConfigurationError(f"Invalid Azure OpenAI settings: {e}") from e

    def missing(self) -> list:
        """Names of the required settings that are not configured."""
        required = {
            "endpoint": self.endpoint,
            "api_key": self.api_key,
            "deployment_name": self.deployment_name,
        }
        return [name for name, value in required.items() if not value]


class ServerSettings(BaseModel):
    """HTTP server settings."""

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    debug: bool = False
    frontend_origin: str = "*"

    @classmethod
    def from_env(cls) -> "ServerSettings":
        return cls(
            host=get_env("HOST", default="0.0.0.0"),
            port=int(get_env("PORT", "SERVER_PORT", default="8080")),
            debug=get_env("DEBUG", default="False").lower() == "true",
            frontend_origin=get_env("FRONTEND_ORIGIN", default="*"),
        )
