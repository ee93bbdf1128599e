"""
GitHub Repository View Statistics Sync

Keeps a kintone app in step with the daily view counts reported by the GitHub
traffic API, which only retains the last 14 days.
"""

__version__ = "1.0.0"

from .app import ViewSyncRunner, handler, run_sync
from .github_client import GitHubTrafficClient
from .models import StoredRecord, SyncResult, ViewRecord
from .store_client import KintoneStoreClient

__all__ = [
    "ViewSyncRunner",
    "GitHubTrafficClient",
    "KintoneStoreClient",
    "ViewRecord",
    "StoredRecord",
    "SyncResult",
    "handler",
    "run_sync",
]
