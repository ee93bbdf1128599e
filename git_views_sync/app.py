#!/usr/bin/env python3
"""
GitHub Repository View Statistics Sync

Fetches daily view counts from the GitHub traffic API and appends the days not
yet stored into a kintone app, so history survives GitHub's 14-day window.
"""

import logging
import sys
from datetime import date, datetime, timezone
from typing import Callable, List, Optional, Tuple

from .config import SyncConfig, load_configuration
from .errors import ConfigurationError
from .github_client import GitHubTrafficClient
from .models import StoredRecord, SyncResult, ViewRecord
from .store_client import KintoneStoreClient

# Cutoff used when the app has no usable record for the project yet.
SENTINEL_CUTOFF = date(2000, 1, 1)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def select_pending(project: str, views: List[ViewRecord], cutoff: date, today: date) -> List[StoredRecord]:
    """
    Pick the records that still need to be stored.

    A day qualifies when it is strictly after the cutoff and is not today,
    whose counts are still growing. Upstream order is preserved.
    """
    pending = []
    for view in views:
        day = view.date
        if day <= cutoff or day == today:
            continue
        pending.append(StoredRecord(project, day.isoformat(), view.count, view.uniques))
    return pending


class ViewSyncRunner:
    """Copies new daily view statistics for one repository into kintone."""

    def __init__(self, owner: str, repo: str, store, analytics, clock: Callable[[], date] = utc_today):
        """
        Initialize the runner.

        Args:
            owner: Repository owner
            repo: Repository name
            store: Object with ``read_latest`` and ``write``, usually a KintoneStoreClient
            analytics: Object with ``fetch_views``, usually a GitHubTrafficClient
            clock: Returns the current date, read once per run
        """
        self.owner = owner
        self.repo = repo
        self.store = store
        self.analytics = analytics
        self.clock = clock
        self.logger = logging.getLogger(__name__)

    @property
    def project(self) -> str:
        return f"{self.owner}/{self.repo}"

    @classmethod
    def from_config(cls, config: SyncConfig) -> 'ViewSyncRunner':
        store = KintoneStoreClient(
            config.kintone_domain, config.kintone_app_id, config.kintone_api_token, timeout=config.http_timeout
        )
        analytics = GitHubTrafficClient(config.github_token, config.github_api_url, timeout=config.http_timeout)
        return cls(config.github_owner, config.github_repo, store, analytics)

    def run(self, dry_run: bool = False) -> SyncResult:
        """Run one sync. Any failure propagates; writes already made stay."""
        project = self.project

        latest = self.store.read_latest(project)
        cutoff = latest or SENTINEL_CUTOFF
        today = self.clock()
        if latest is None:
            self.logger.info(f"No stored date for {project}, using cutoff {cutoff.isoformat()}")
        else:
            self.logger.info(f"Last stored date for {project}: {latest.isoformat()}")

        views = self.analytics.fetch_views(self.owner, self.repo)
        pending = select_pending(project, views, cutoff, today)
        result = SyncResult(project, cutoff, today, pending=pending,
                            skipped=len(views) - len(pending), dry_run=dry_run)
        self.logger.debug(f"{len(pending)} pending, {result.skipped} skipped for {project}")

        if not pending or dry_run:
            self.logger.info(result.message)
            return result

        for record in pending:
            record_id = self.store.write(record.project, record.date, record.count, record.uniques)
            result.record_ids.append(record_id)

        self.logger.info(result.message)
        return result

    def close(self):
        for client in (self.store, self.analytics):
            close = getattr(client, "close", None)
            if close is not None:
                close()


def run_sync(config: Optional[SyncConfig] = None, dry_run: bool = False) -> Tuple[bool, str]:
    """Runs the view statistics synchronization."""
    logger = logging.getLogger(__name__)
    try:
        if config is None:
            config = load_configuration()

        runner = ViewSyncRunner.from_config(config)
        try:
            result = runner.run(dry_run=dry_run)
        finally:
            runner.close()
        return True, result.message
    except Exception as e:
        logger.error(f"Application error: {e}")
        return False, str(e)


def handler(event=None, context=None) -> Tuple[bool, str]:
    """Entry point for a scheduled invocation. The payload is not used."""
    return run_sync()


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def main() -> int:
    """Main entry point of the application."""
    try:
        config = load_configuration()
    except ConfigurationError as e:
        setup_logging()
        logging.getLogger(__name__).error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)
    try:
        ok, message = run_sync(config)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return 1
    print(message)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
