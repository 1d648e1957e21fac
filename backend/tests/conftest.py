"""Root conftest: shared test configuration."""

import os

# Plain-text logs in test output
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("PORT", "3000")
