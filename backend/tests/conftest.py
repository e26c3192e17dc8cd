"""Root conftest — shared test configuration."""

import os

# Tests never read a developer's .env overrides for logging
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SKIP_CODE_THRESHOLD", "400")
os.environ.setdefault("REQUEST_LOG_FORMAT", "tiny")
