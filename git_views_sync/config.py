#!/usr/bin/env python3
"""
Configuration loading for the view statistics sync.

Settings come from environment variables. A ``.env`` file in the working
directory is loaded first when present; variables already set in the
environment win.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigurationError

DEFAULT_GITHUB_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class SyncConfig:
    """Connection parameters for both APIs."""
    kintone_domain: str
    kintone_app_id: str
    kintone_api_token: str
    github_owner: str
    github_repo: str
    github_token: str
    github_api_url: str = DEFAULT_GITHUB_API_URL
    http_timeout: Optional[float] = None
    log_level: str = "INFO"


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name)
    if not value:
        raise ConfigurationError(f"{name} environment variable not set.")
    return value


def load_configuration(env: Optional[Mapping[str, str]] = None) -> SyncConfig:
    """Load configuration from environment variables."""
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    timeout_raw = env.get('HTTP_TIMEOUT')
    http_timeout = None
    if timeout_raw:
        try:
            http_timeout = float(timeout_raw)
        except ValueError:
            raise ConfigurationError(f"HTTP_TIMEOUT must be a number, got {timeout_raw!r}.")

    return SyncConfig(
        kintone_domain=_require(env, 'KINTONE_DOMAIN'),
        kintone_app_id=_require(env, 'KINTONE_APP_ID'),
        kintone_api_token=_require(env, 'KINTONE_API_TOKEN'),
        github_owner=_require(env, 'GITHUB_OWNER'),
        github_repo=_require(env, 'GITHUB_REPO_NAME'),
        github_token=_require(env, 'GITHUB_PERSONAL_ACCESS_TOKEN'),
        github_api_url=env.get('GITHUB_API_URL') or DEFAULT_GITHUB_API_URL,
        http_timeout=http_timeout,
        log_level=(env.get('LOG_LEVEL') or "INFO").upper(),
    )
