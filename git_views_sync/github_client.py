#!/usr/bin/env python3
"""
GitHub traffic API client.
"""

import logging
from typing import List, Optional

import requests

from .config import DEFAULT_GITHUB_API_URL
from .errors import AnalyticsFetchError, TransportError, response_message
from .models import ViewRecord


class GitHubTrafficClient:
    """Fetches repository traffic views from the GitHub REST API."""

    def __init__(self, github_token: str, api_url: str = DEFAULT_GITHUB_API_URL, timeout: Optional[float] = None):
        """
        Initialize the traffic client.

        Args:
            github_token: GitHub Personal Access Token with push access to the repository
            api_url: Base URL of the REST API, override for GitHub Enterprise
            timeout: Request timeout in seconds, None for the transport default
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"token {github_token}",
            "Accept": "application/vnd.github.v3+json"
        })
        self.logger = logging.getLogger(__name__)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.session.close()

    def fetch_views(self, owner: str, repo: str) -> List[ViewRecord]:
        """Fetch the daily view series, in the order GitHub returns it."""
        url = f"{self.api_url}/repos/{owner}/{repo}/traffic/views"
        self.logger.info(f"Fetching views for {owner}/{repo}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error(f"Error fetching views for {owner}/{repo}: {e}")
            raise TransportError(str(e))

        if not response.ok:
            message = response_message(response)
            self.logger.error(f"Error fetching views for {owner}/{repo}: {message}")
            raise AnalyticsFetchError(message, response.status_code)

        try:
            entries = response.json()["views"]
            records = [ViewRecord.from_github_entry(entry) for entry in entries]
            for record in records:
                record.date  # raises on a malformed timestamp
            return records
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            self.logger.error(f"Malformed views response for {owner}/{repo}: {e!r}")
            raise AnalyticsFetchError(f"Malformed views response: {e!r}", response.status_code)
