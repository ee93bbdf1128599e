#!/usr/bin/env python3
"""
Exceptions raised while synchronizing view statistics.
"""

from typing import Optional


def response_message(response) -> str:
    """Status line of a failed response plus the API's ``message``, if any."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return f"{response.status_code} {response.reason}: {body['message']}"
    return f"{response.status_code} {response.reason}"


class SyncError(Exception):
    """Base class for all sync failures."""


class ConfigurationError(SyncError):
    """A required setting is missing or invalid."""


class TransportError(SyncError):
    """Network-level failure talking to GitHub or kintone."""


class StoreError(SyncError):
    """The kintone API answered with a non-success status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StoreReadError(StoreError):
    pass


class StoreWriteError(StoreError):
    pass


class AnalyticsFetchError(SyncError):
    """GitHub traffic API call failed or returned an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
