#!/usr/bin/env python3
"""
kintone record API client.

Reads the most recently stored date for a project and inserts one record per
day of view statistics.
"""

import logging
from datetime import date
from typing import Optional

import requests

from .errors import StoreReadError, StoreWriteError, TransportError, response_message
from .models import StoredRecord


def _quote(value: str) -> str:
    """Render a string literal for a kintone query."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class KintoneStoreClient:
    """Handles all kintone operations for view statistics."""

    def __init__(self, domain: str, app_id: str, api_token: str, timeout: Optional[float] = None):
        """
        Initialize the store client.

        Args:
            domain: kintone host, e.g. ``subdomain.cybozu.com``
            app_id: ID of the app that holds the view records
            api_token: API token with view and add permissions on the app
            timeout: Request timeout in seconds, None for the transport default
        """
        self.base_url = f"https://{domain}/k/v1"
        self.app_id = app_id
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"X-Cybozu-API-Token": api_token})
        self.logger = logging.getLogger(__name__)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.session.close()

    def read_latest(self, project: str) -> Optional[date]:
        """
        Get the most recent stored date for a project.

        Returns None when the app holds no record for the project or the date
        field cannot be parsed.
        """
        self.logger.info("[START] get kintone record")
        params = {
            "app": self.app_id,
            "query": f"project = {_quote(project)} order by date desc limit 1 offset 0",
            "fields[0]": "date",
        }

        try:
            response = self.session.get(f"{self.base_url}/records.json", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error(f"Error reading kintone records for {project}: {e}")
            raise TransportError(str(e))

        if response.status_code != 200:
            message = response_message(response)
            self.logger.error(f"kintone read failed for {project}: {message}")
            raise StoreReadError(message, response.status_code)

        try:
            value = response.json()["records"][0]["date"]["value"]
            return date.fromisoformat(value)
        except (ValueError, KeyError, IndexError, TypeError) as e:
            self.logger.info(f"No usable stored date for {project}: {e!r}")
            return None

    def write(self, project: str, day: str, count: int, uniques: int) -> str:
        """Insert one view record and return the new record id."""
        self.logger.info(f"[START] post kintone record: {day}")
        payload = {
            "app": self.app_id,
            "record": StoredRecord(project, day, count, uniques).to_kintone_record(),
        }

        try:
            response = self.session.post(f"{self.base_url}/record.json", json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error(f"Error posting kintone record for {project} on {day}: {e}")
            raise TransportError(str(e))

        if response.status_code != 200:
            message = response_message(response)
            self.logger.error(f"kintone write failed for {project} on {day}: {message}")
            raise StoreWriteError(message, response.status_code)

        try:
            return str(response.json()["id"])
        except (ValueError, KeyError, TypeError) as e:
            raise StoreWriteError(f"Unexpected kintone response: {e!r}", response.status_code)
