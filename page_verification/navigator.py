from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from page_verification.results import NavigationFailed


async def navigate(page, url, timeout):
    """
    Single attempt, waiting for the "load" event.
    Returns None on a 2xx response, NavigationFailed otherwise.
    """
    try:
        response = await page.goto(url, wait_until="load", timeout=timeout * 1000)
    except PlaywrightTimeoutError as e:
        # Logged as error_, not timeout_: the "load" wait is part of navigation
        return NavigationFailed(url, status=None, status_text=e.message, load_timeout=True)
    except PlaywrightError as e:
        # DNS failure, connection refused
        return NavigationFailed(url, status=None, status_text=e.message)

    if response is None:
        return NavigationFailed(url, status=None, status_text="No response received")
    if not response.ok:
        return NavigationFailed(url, status=response.status, status_text=response.status_text)
    return None
