import asyncio
import sys

from page_verification import config
from page_verification.orchestrator import run_verification
from page_verification.pages import DEFAULT_PAGES, load_pages
from page_verification.results import ArtifactWriteError, RegistryError
from page_verification.server import wait_for_server


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    port = argv[0] if argv else None
    base_url = f"http://127.0.0.1:{port}" if port else config.BASE_URL
    try:
        pages = load_pages(config.PAGES_FILE) if config.PAGES_FILE else DEFAULT_PAGES
    except (OSError, RegistryError) as e:
        print(f"FAILED: could not load pages: {e}")
        return 2

    if not wait_for_server(base_url, config.SERVER_WAIT_TIMEOUT):
        print(f"WARNING: no response from {base_url} after {config.SERVER_WAIT_TIMEOUT}s, verifying anyway")

    try:
        report = asyncio.run(run_verification(pages, base_url=base_url))
    except ArtifactWriteError as e:
        print(f"FAILED: {e}")
        return 2

    print("\n--- Verification Results ---")
    print(report.summary())
    if report.passed:
        print("✅ SUCCESS: all pages rendered.")
        return 0
    print(f"❌ FAILURE: {len(report.failures)} page(s) failed, see {config.VERIFICATION_DIR}/")
    return 1


if __name__ == "__main__":
    sys.exit(main())
