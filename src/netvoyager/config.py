"""Local configuration for netvoyager."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_OUTPUT_PATH = "data.csv"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 0
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "netvoyager/0.1 (+https://github.com/netvoyager/netvoyager)"

# Relative paths resolve against the working directory at run time.
NETVOYAGER_OUTPUT_PATH = Path(os.getenv("NETVOYAGER_OUTPUT_PATH", DEFAULT_OUTPUT_PATH)).expanduser()
NETVOYAGER_FETCH_TIMEOUT_S = float(os.getenv("NETVOYAGER_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
NETVOYAGER_FETCH_MAX_RETRIES = int(os.getenv("NETVOYAGER_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
NETVOYAGER_FETCH_BACKOFF_S = float(os.getenv("NETVOYAGER_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
NETVOYAGER_USER_AGENT = os.getenv("NETVOYAGER_USER_AGENT", DEFAULT_USER_AGENT)
