"""Root conftest — shared test configuration."""

import os

# Tests never wait on the conversion stub or emit JSON logs
os.environ.setdefault("CONVERSION_DELAY_SECONDS", "0")
os.environ.setdefault("LOG_FORMAT", "text")
