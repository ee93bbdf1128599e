#!/usr/bin/env python3
"""
Main entry point for scheduled runs of git-views-sync (cron, task scheduler).
"""

import os
import sys

# Add the project directory to the Python path
sys.path.insert(0, os.path.dirname(__file__))

from git_views_sync.app import main

if __name__ == "__main__":
    sys.exit(main())
