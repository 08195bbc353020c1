"""
Resolve a short model alias to its full Anthropic model identifier.

Usage:
  python scripts/resolve_model.py opus
  python scripts/resolve_model.py haiku --check-key
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path as _Path
from typing import List, Optional

from dotenv import load_dotenv, find_dotenv

# Ensure project root is on sys.path so `claude_models` is importable when running as a script
sys.path.append(str(_Path(__file__).resolve().parents[1]))
from claude_models import get_model, validate_api_key
from claude_models.registry import API_KEY_ENV


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Resolve a model alias (opus, sonnet, haiku)")
    p.add_argument("name", help="Model alias; unknown names resolve to sonnet")
    p.add_argument(
        "--check-key",
        action="store_true",
        help=f"Also check that {API_KEY_ENV} looks like an Anthropic key",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    print(get_model(args.name))

    if not args.check_key:
        return 0

    _dotenv_path = find_dotenv(usecwd=True)
    if _dotenv_path:
        load_dotenv(_dotenv_path)
    api_key = os.getenv(API_KEY_ENV)
    if not api_key:
        print(f"{API_KEY_ENV} is not set", file=sys.stderr)
        return 1
    if not validate_api_key(api_key):
        print(f"{API_KEY_ENV} does not look like an Anthropic key", file=sys.stderr)
        return 1
    print(f"{API_KEY_ENV} looks valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
