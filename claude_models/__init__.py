"""Anthropic client factory and model alias resolution."""

from .clients_anthropic import client_from_env, create_claude_client, validate_api_key
from .registry import DEFAULT_ALIAS, MODEL_MAP, get_model, model_config
from .types import ClaudeModel, ModelConfig

__all__ = [
    "create_claude_client",
    "client_from_env",
    "validate_api_key",
    "get_model",
    "model_config",
    "MODEL_MAP",
    "DEFAULT_ALIAS",
    "ClaudeModel",
    "ModelConfig",
]
