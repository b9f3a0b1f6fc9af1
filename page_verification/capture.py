from pathlib import Path

from playwright.async_api import Error as PlaywrightError

from page_verification.results import ArtifactWriteError, ArtifactWriteFailed, Passed, ScreenshotTimeout


async def capture(page, spec, store, url, timeout):
    """
    Full-page screenshot into the store. The file existing with content is the success signal.
    A browser-side failure is ScreenshotTimeout; only a filesystem fault is ArtifactWriteFailed.
    """
    path = store.screenshot_path_for(spec)
    try:
        image = await page.screenshot(full_page=True, timeout=timeout * 1000)
    except PlaywrightError as e:
        return ScreenshotTimeout(url, spec.selector, detail=e.message)

    try:
        store.write_bytes(spec, path, image)
    except ArtifactWriteError as e:
        return ArtifactWriteFailed(e.path, str(e.cause))

    if not Path(path).is_file() or Path(path).stat().st_size == 0:
        return ArtifactWriteFailed(str(path), "screenshot missing or empty after write")
    return Passed(str(path))
