"""Shared test setup."""

import os

# Settings require a listen port; reduce log noise in test runs
os.environ.setdefault("PORT", "8080")
os.environ.setdefault("LOG_LEVEL", "WARNING")
