"""Provider settings: YAML file defaults with environment overrides."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

LOGGER = logging.getLogger("productcopy.config")

DEFAULT_CONFIG_PATH = "configs/provider.yaml"

@dataclass(frozen=True)
class ProviderSettings:
    region: str = "us-east-1"
    base_url: str = ""
    api_key: str = ""
    model_id: str = "anthropic.claude-3-sonnet-20240229-v1:0"
    temperature: float = 0.7
    max_tokens: int = 500
    timeout_s: float = 60.0

    @property
    def endpoint(self) -> str:
        base = self.base_url or f"https://bedrock-runtime.{self.region}.amazonaws.com/openai"
        return f"{base.rstrip('/')}/v1/chat/completions"

def load_cfg(path: str) -> dict[str, Any]:
    """Read a YAML config file; a missing file yields an empty mapping."""
    p = Path(path)
    if not p.exists():
        LOGGER.info("No config file at %s; using defaults and environment", path)
        return {}
    with open(p, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(cfg).__name__}")
    # Empty keys (`api_key:`) load as None; treat them as unset.
    return {k: v for k, v in cfg.items() if v is not None}

def load_settings(cfg_path: str | None = None) -> ProviderSettings:
    """
    Build provider settings.

    Args:
        cfg_path: YAML config path. Defaults to $PRODUCT_COPY_CONFIG or
            configs/provider.yaml.
    """
    path = cfg_path or os.getenv("PRODUCT_COPY_CONFIG", DEFAULT_CONFIG_PATH)
    cfg = load_cfg(path)
    defaults = ProviderSettings()

    return ProviderSettings(
        region=os.getenv("PROVIDER_REGION", str(cfg.get("region", defaults.region))),
        base_url=os.getenv("PROVIDER_BASE_URL", str(cfg.get("base_url", defaults.base_url))),
        api_key=os.getenv("PROVIDER_API_KEY", str(cfg.get("api_key", defaults.api_key))),
        model_id=os.getenv("PROVIDER_MODEL_ID", str(cfg.get("model_id", defaults.model_id))),
        temperature=float(os.getenv("TEMPERATURE", cfg.get("temperature", defaults.temperature))),
        max_tokens=int(os.getenv("MAX_TOKENS", cfg.get("max_tokens", defaults.max_tokens))),
        timeout_s=float(os.getenv("PROVIDER_TIMEOUT", cfg.get("timeout_s", defaults.timeout_s))),
    )
