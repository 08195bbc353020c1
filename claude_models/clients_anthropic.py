from __future__ import annotations

import logging
import os
from typing import Optional

import anthropic
from dotenv import load_dotenv, find_dotenv

from .registry import API_KEY_ENV


logger = logging.getLogger(__name__)

_KEY_PREFIX = "sk-ant-"
_KEY_MIN_LENGTH = 20


def create_claude_client(api_key: str) -> anthropic.Anthropic:
    """Build a new Anthropic client for ``api_key``.

    No validation and no network traffic happen here; a bad key only
    surfaces once a request is issued.
    """
    return anthropic.Anthropic(api_key=api_key)


def validate_api_key(api_key: str) -> bool:
    return api_key.startswith(_KEY_PREFIX) and len(api_key) > _KEY_MIN_LENGTH


def client_from_env(api_key: Optional[str] = None) -> anthropic.Anthropic:
    # Load .env if present
    _dotenv_path = find_dotenv(usecwd=True)
    if _dotenv_path:
        load_dotenv(_dotenv_path)
        logger.debug("Loaded environment from %s", _dotenv_path)
    api_key = api_key or os.getenv(API_KEY_ENV)
    if not api_key:
        raise ValueError(f"{API_KEY_ENV} environment variable is required")
    return create_claude_client(api_key)
