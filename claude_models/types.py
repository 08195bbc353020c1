from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


ClaudeModel = Literal[
    "claude-opus-4-1-20250805",
    "claude-sonnet-4-5-20250929",
    "claude-haiku-4-5-20251001",
]


@dataclass(frozen=True)
class ModelConfig:
    name: str
    api_key_env: str
    model_id: ClaudeModel
