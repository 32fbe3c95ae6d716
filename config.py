"""
Configuration and shared clients for the VibeShare catalog.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Pre-import client to avoid deadlocks during hot reload
from openai import OpenAI

from models import User, UserRole

# Client cache to avoid recreating clients (prevents deadlocks during hot reload)
_client_cache: dict = {}

# Load environment variables
load_dotenv()
user_config = Path.home() / ".vibeshare" / "config.env"
if user_config.exists():
    load_dotenv(user_config, override=True)

# Paths
DATA_DIR = Path(os.environ.get("VIBESHARE_DATA_DIR", "data"))

# Storage
STORAGE_KEY = "vibe_entries"
STORAGE_BACKEND = os.environ.get("VIBESHARE_STORAGE", "json")

# Enrichment
ENRICHMENT_MODEL = os.environ.get("VIBESHARE_MODEL", "google/gemini-2.5-flash")
API_KEY_ENV = "GOOGLE_API_KEY"
LEGACY_API_KEY_ENV = "API_KEY"

# Web
WEB_PORT = int(os.environ.get("VIBESHARE_PORT", "5001"))

# Mock signed-in user. There is no real identity model.
MOCK_USER = User(
    id="u1",
    name="Alex Engineer",
    avatar="https://picsum.photos/seed/alex/200/200",
    role=UserRole.ENGINEER,
)

PROVIDER_BASE_URLS = {
    "google": "https://generativelanguage.googleapis.com/v1beta/openai/",
    "openai": None,
    "openrouter": "https://openrouter.ai/api/v1",
}


def get_api_key() -> Optional[str]:
    """Credential for the enrichment service, or None when unconfigured."""
    return os.environ.get(API_KEY_ENV) or os.environ.get(LEGACY_API_KEY_ENV) or None


def _get_cached_client(provider: str, api_key: str):
    """Get or create a cached client for a provider."""
    cache_key = (provider, api_key)
    if cache_key in _client_cache:
        return _client_cache[cache_key]

    if provider not in PROVIDER_BASE_URLS:
        raise ValueError(f"Unknown provider: {provider}")

    base_url = PROVIDER_BASE_URLS[provider]
    if base_url:
        client = OpenAI(base_url=base_url, api_key=api_key, timeout=30.0)
    else:
        client = OpenAI(api_key=api_key, timeout=30.0)

    _client_cache[cache_key] = client
    return client


def parse_model_key(model_key: str) -> tuple[str, str]:
    """Split "provider/model-name" into (provider, model). Bare names default to google."""
    if "/" in model_key:
        provider, model_name = model_key.split("/", 1)
        return provider.lower(), model_name
    return "google", model_key


def get_client(model_key: str, api_key: str):
    """
    Get API client for a model key.

    Returns (client, model_name) tuple.
    """
    provider, model_name = parse_model_key(model_key)
    return _get_cached_client(provider, api_key), model_name
