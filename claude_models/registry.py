from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .types import ClaudeModel, ModelConfig


API_KEY_ENV = "ANTHROPIC_API_KEY"
DEFAULT_ALIAS = "sonnet"

MODEL_MAP: Mapping[str, ClaudeModel] = MappingProxyType(
    {
        "opus": "claude-opus-4-1-20250805",
        "sonnet": "claude-sonnet-4-5-20250929",
        "haiku": "claude-haiku-4-5-20251001",
    }
)


def get_model(name: str) -> ClaudeModel:
    """Return the model identifier for a short alias.

    Lookup is exact and case-sensitive. Unknown names (and aliases mapped to
    an empty value) fall back to the ``sonnet`` identifier.
    """
    return MODEL_MAP.get(name) or MODEL_MAP[DEFAULT_ALIAS]


def model_config(name: str) -> ModelConfig:
    alias = name if MODEL_MAP.get(name) else DEFAULT_ALIAS
    return ModelConfig(name=alias, api_key_env=API_KEY_ENV, model_id=get_model(name))
