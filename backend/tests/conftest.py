"""Root conftest: shared test configuration."""

import os

# Keep tests away from a real data.json in the working directory
os.environ.setdefault("DATA_FILE", "test-data.json")
os.environ.setdefault("LOG_LEVEL", "WARNING")
