"""Root conftest - shared test configuration."""

import os

# Ensure tests never pick up a developer's scoreboard settings
os.environ.setdefault("SCOREBOARD_LOG_LEVEL", "WARNING")
os.environ.setdefault("SCOREBOARD_LOG_FORMAT", "text")
os.environ.setdefault("SCOREBOARD_SERIALIZE_MUTATIONS", "true")
