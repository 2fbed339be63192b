"""
Settings loading for QUILL.

Packaged defaults (quill/config/defaults.yaml) are merged with an optional user
file and a handful of environment overrides:

- QUILL_CONFIG_PATH: YAML file merged over the defaults
- QUILL_AI_ENABLED: "true"/"false", toggles the writing assistant capability
- LLM_PROVIDER: assistant provider name ("openai" or "anthropic")
- LATEX_COMPILER: LaTeX executable used by the compiler
- LOGS_PATH: base directory for session logs
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf

load_dotenv()

DEFAULTS_PATH = Path(__file__).resolve().parent.parent / "config" / "defaults.yaml"

TRUTHY = {"1", "true", "yes", "on"}


def _env_overrides() -> dict:
    """Collect settings overrides from environment variables."""
    overrides = {}

    ai_enabled = os.getenv("QUILL_AI_ENABLED")
    if ai_enabled is not None:
        overrides.setdefault("assistant", {})["enabled"] = ai_enabled.strip().lower() in TRUTHY

    provider = os.getenv("LLM_PROVIDER")
    if provider:
        overrides.setdefault("assistant", {})["provider"] = provider.lower()

    compiler = os.getenv("LATEX_COMPILER")
    if compiler:
        overrides.setdefault("latex", {})["compiler"] = compiler

    logs_path = os.getenv("LOGS_PATH")
    if logs_path:
        overrides["logs_path"] = logs_path

    return overrides


def load_settings(config_path: Optional[Path] = None, use_env: bool = True) -> DictConfig:
    """
    Load QUILL settings.

    Args:
        config_path: Optional YAML file merged over the defaults. Falls back to
                     QUILL_CONFIG_PATH when not given.
        use_env: Apply environment variable overrides (default: True)

    Returns:
        Merged OmegaConf DictConfig

    Raises:
        FileNotFoundError: If an explicit config file does not exist
    """
    settings = OmegaConf.load(DEFAULTS_PATH)

    if config_path is None and use_env and os.getenv("QUILL_CONFIG_PATH"):
        config_path = Path(os.getenv("QUILL_CONFIG_PATH"))

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        settings = OmegaConf.merge(settings, OmegaConf.load(config_path))

    if use_env:
        settings = OmegaConf.merge(settings, OmegaConf.create(_env_overrides()))

    return settings
