"""
Runs the verification pipeline once per page and aggregates the results.

Pipeline for one page:
    navigate -> wait for the readiness element -> wait for network idle -> screenshot
Any failing step writes a diagnostic log and ends that page's pipeline.
Pages don't share browser pages or artifact paths, so they can run side by side.
"""

import asyncio
from dataclasses import dataclass, field

from playwright.async_api import async_playwright

from page_verification import config
from page_verification.artifacts import ArtifactStore
from page_verification.capture import capture
from page_verification.diagnostics import write_diagnostic
from page_verification.navigator import navigate
from page_verification.pages import DEFAULT_PAGES, validate_pages
from page_verification.readiness import wait_until_ready
from page_verification.results import (
    ArtifactWriteError,
    ArtifactWriteFailed,
    Passed,
    RunReport,
    outcome_from_result,
)


@dataclass(frozen=True)
class Timeouts:
    navigation: float = field(default_factory=lambda: config.NAVIGATION_TIMEOUT)
    visible: float = field(default_factory=lambda: config.VISIBLE_TIMEOUT)
    network_idle: float = field(default_factory=lambda: config.NETWORK_IDLE_TIMEOUT)
    screenshot: float = field(default_factory=lambda: config.SCREENSHOT_TIMEOUT)


async def verify_page(browser, spec, store, base_url=None, timeouts=None):
    """Runs one page to completion and returns its result value. Does not raise for page failures."""
    base_url = base_url or config.BASE_URL
    timeouts = timeouts or Timeouts()
    url = spec.url(base_url)

    page = await browser.new_page()
    console_messages = []
    page.on("console", lambda msg: console_messages.append(f"[console] {msg.text}") if msg.type == "error" else None)
    page.on("pageerror", lambda exc: console_messages.append(f"[pageerror] {exc}"))

    try:
        print(f"Navigating to {url} for {spec.name} page...")
        failure = await navigate(page, url, timeouts.navigation)
        if failure is None:
            failure = await wait_until_ready(page, url, spec.selector, timeouts.visible, timeouts.network_idle)

        if failure is None:
            print(f"Key element and network idle for {spec.name}. Taking screenshot...")
            result = await capture(page, spec, store, url, timeouts.screenshot)
            if isinstance(result, Passed):
                print(f"Screenshot saved for {spec.name} at: {result.screenshot_path}")
                return result
            if isinstance(result, ArtifactWriteFailed):
                print(f"Could not save screenshot for {spec.name}: {result.cause}")
                return result
            failure = result

        print(f"Error during visual verification for {spec.name}: {failure.category}")
        try:
            failure = await write_diagnostic(page, spec, store, failure, console_messages)
        except ArtifactWriteError as e:
            return ArtifactWriteFailed(e.path, str(e.cause))
        print(f"Page content saved to {failure.log_path}")
        return failure
    finally:
        await page.close()


async def _verify_all(browser, pages, store, base_url, workers, timeouts):
    semaphore = asyncio.Semaphore(max(1, workers))

    async def bounded(spec):
        async with semaphore:
            return await verify_page(browser, spec, store, base_url, timeouts)

    # A page that raises must not abandon its siblings
    return await asyncio.gather(*(bounded(spec) for spec in pages), return_exceptions=True)


def build_report(pages, results):
    """
    Pairs results with their pages, in registry order.
    Raises the first unexpected exception, or ArtifactWriteError for the first
    page whose artifact could not be written.
    """
    outcomes = []
    for spec, result in zip(pages, results):
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, ArtifactWriteFailed):
            raise ArtifactWriteError(result.path, result.cause, spec)
        outcomes.append(outcome_from_result(spec, result))
    return RunReport(tuple(outcomes))


async def run_verification(pages=DEFAULT_PAGES, base_url=None, output_dir=None, workers=None,
                           timeouts=None, browser=None):
    """
    Verifies every page and returns a RunReport; report.passed is the overall verdict.
    Launches headless Chromium unless a browser is passed in.
    """
    pages = validate_pages(pages)
    base_url = base_url or config.BASE_URL
    workers = workers or config.WORKERS
    timeouts = timeouts or Timeouts()
    store = ArtifactStore(output_dir or config.VERIFICATION_DIR)
    store.ensure_directory()

    if browser is not None:
        results = await _verify_all(browser, pages, store, base_url, workers, timeouts)
    else:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=True, args=config.BROWSER_ARGS)
            try:
                results = await _verify_all(browser, pages, store, base_url, workers, timeouts)
            finally:
                await browser.close()

    return build_report(pages, results)
