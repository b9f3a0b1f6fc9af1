"""
Failure logs: what went wrong, where, and the markup the browser had at that moment.
"""

import dataclasses

from playwright.async_api import Error as PlaywrightError

from page_verification.results import NavigationFailed

RULE = "=" * 60
DIVIDER = "-" * 60


async def snapshot_markup(page) -> str:
    try:
        return await page.content()
    except PlaywrightError as e:
        return f"<markup unavailable: {e.message}>"


def format_diagnostic(failure, markup, console_messages=()):
    if isinstance(failure, NavigationFailed):
        title = "ERROR: Failed to load page for visual verification"
        status = failure.status if failure.status is not None else "none"
        details = [
            f"URL: {failure.url}",
            f"Failure: {failure.label}",
            f"Status: {status}",
            f"Status Text: {failure.status_text}",
        ]
    else:
        title = "ERROR: Timeout during visual verification"
        details = [
            f"URL: {failure.url}",
            f"Failure: {failure.category}",
            f"Selector: {failure.selector}",
            f"Detail: {failure.detail}",
        ]

    lines = [RULE, title, RULE] + details
    if console_messages:
        lines.append("Browser Console:")
        lines.extend(f"  {message}" for message in console_messages)
    lines += ["Page Content:", DIVIDER, markup, DIVIDER, ""]
    return "\n".join(lines)


async def write_diagnostic(page, spec, store, failure, console_messages=()):
    """
    Writes error_<basename>.log or timeout_<basename>.log and returns the failure
    with log_path filled in. Raises ArtifactWriteError if the log can't be written.
    """
    path = store.log_path_for(spec, failure.kind)
    markup = await snapshot_markup(page)
    store.write_text(spec, path, format_diagnostic(failure, markup, console_messages))
    return dataclasses.replace(failure, log_path=str(path))
