"""
Pydantic models for YAML client configuration.
Provides schema validation with clear error messages for auth and request settings.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator

from bearer_client.core.models import HttpMethod


def _check_http_url(v: str, field_name: str) -> str:
    if not v.startswith(('http://', 'https://')):
        raise ValueError(f'{field_name} must be a valid HTTP/HTTPS URL')
    return v


class AuthConfig(BaseModel):
    """Configuration for the bearer-token endpoint."""
    url: str = Field(..., description="Token endpoint queried with OPTIONS")
    token_field: Optional[str] = Field(
        None,
        description="JSON field holding the token; when unset the whole body is the token"
    )

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        return _check_http_url(v, 'auth.url')

    @field_validator('token_field')
    @classmethod
    def validate_token_field(cls, v):
        if v is not None and not v.strip():
            raise ValueError('token_field cannot be blank')
        return v


class RequestConfig(BaseModel):
    """Configuration for the authenticated target request."""
    url: str = Field(..., description="Target URL")
    method: str = Field("GET", description="HTTP method to use")
    headers: Dict[str, str] = Field(default_factory=dict, description="HTTP headers")
    payload: Dict[str, Any] = Field(default_factory=dict, description="JSON body; empty sends no body")

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        return _check_http_url(v, 'request.url')

    @field_validator('method')
    @classmethod
    def validate_method(cls, v):
        return HttpMethod.parse(v).value


class ClientConfig(BaseModel):
    """Root configuration model for the client."""
    auth: AuthConfig
    request: RequestConfig
    timeout_s: Optional[float] = Field(30.0, gt=0, description="Timeout for each round trip in seconds")
    keep_error_body: bool = Field(False, description="Attach the decoded response to 4xx/5xx errors")


def load_and_validate_config(config_path: str) -> ClientConfig:
    """
    Load and validate a client configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Validated ClientConfig object

    Raises:
        ValueError: If the YAML is malformed or the configuration is invalid
        FileNotFoundError: If config file doesn't exist
    """
    import yaml

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}")

    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration in {config_path} must be a mapping")

    try:
        return ClientConfig(**raw_config)
    except ValidationError as e:
        error_messages = []
        for error in e.errors():
            field_path = '.'.join(str(loc) for loc in error['loc'])
            error_messages.append(f"  {field_path}: {error['msg']}")

        raise ValueError(
            f"Configuration validation failed for {config_path}:\n" +
            '\n'.join(error_messages)
        ) from e
