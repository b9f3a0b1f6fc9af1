import os

# Target server and output location.
# Timeouts are in seconds; Playwright takes milliseconds.

BASE_URL = os.environ.get("VERIFY_BASE_URL", "http://127.0.0.1:8080")

# Relative to the directory the harness is launched from (the project root)
VERIFICATION_DIR = os.environ.get("VERIFY_OUTPUT_DIR", "verification")

NAVIGATION_TIMEOUT = float(os.environ.get("VERIFY_NAVIGATION_TIMEOUT", 30))
VISIBLE_TIMEOUT = float(os.environ.get("VERIFY_VISIBLE_TIMEOUT", 15))
NETWORK_IDLE_TIMEOUT = float(os.environ.get("VERIFY_NETWORK_IDLE_TIMEOUT", 20))
SCREENSHOT_TIMEOUT = float(os.environ.get("VERIFY_SCREENSHOT_TIMEOUT", 30))

# Pages verified at the same time
WORKERS = int(os.environ.get("VERIFY_WORKERS", 1))

# How long the runner waits for the static server to answer before starting
SERVER_WAIT_TIMEOUT = float(os.environ.get("VERIFY_SERVER_WAIT", 10))

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

# Optional JSON page list replacing the built-in one
PAGES_FILE = os.environ.get("VERIFY_PAGES_FILE")
