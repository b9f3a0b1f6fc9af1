from playwright.async_api import Error as PlaywrightError

from page_verification.results import ElementNotVisible, NetworkSettleTimeout


async def wait_until_ready(page, url, selector, visible_timeout, idle_timeout):
    """
    Waits for the first element matching `selector` to be visible, then for the
    network to go idle. Both waits are fatal; the second only runs if the first passed.
    Returns None when ready, otherwise the failure.
    """
    locator = page.locator(selector).first
    try:
        await locator.wait_for(state="visible", timeout=visible_timeout * 1000)
    except PlaywrightError as e:
        return ElementNotVisible(url, selector, detail=e.message)

    # No connections for 500ms, as a proxy for stylesheets and images being done
    try:
        await page.wait_for_load_state("networkidle", timeout=idle_timeout * 1000)
    except PlaywrightError as e:
        return NetworkSettleTimeout(url, selector, detail=e.message)

    return None
