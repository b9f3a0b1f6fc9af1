import time

import requests


def wait_for_server(base_url, timeout, interval=0.5):
    """Polls base_url until the server answers with any HTTP status. Returns False on timeout."""
    deadline = time.monotonic() + timeout
    while True:
        try:
            requests.get(base_url, timeout=max(interval, 2))
            return True
        except requests.exceptions.RequestException:
            if time.monotonic() >= deadline:
                return False
            time.sleep(interval)
