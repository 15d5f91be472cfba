import os

# Disable rate limiting for tests
os.environ["OUTLINER_NO_RATE_LIMIT"] = "true"
