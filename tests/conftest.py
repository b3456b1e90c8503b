"""Test configuration and fixtures."""

import os

# Settings are read from the environment; tests never touch production config
os.environ.setdefault("ENVIRONMENT", "test")
