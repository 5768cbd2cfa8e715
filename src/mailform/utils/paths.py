"""Centralized path definitions for the mailform application.

The base directory defaults to ``~/.mailform`` and can be relocated with the
``MAILFORM_HOME`` environment variable.
"""

import os
from pathlib import Path

# Base application directory
MAILFORM_DIR = Path(os.environ.get("MAILFORM_HOME", Path.home() / ".mailform"))

# Subdirectories
LOGS_DIR = MAILFORM_DIR / "logs"

# Specific files
CONFIG_PATH = MAILFORM_DIR / "config.json"
