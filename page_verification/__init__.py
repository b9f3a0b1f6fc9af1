from page_verification.orchestrator import Timeouts, run_verification, verify_page
from page_verification.pages import DEFAULT_PAGES, PageSpec, load_pages, validate_pages
from page_verification.results import (
    ArtifactWriteError,
    OutcomeStatus,
    RegistryError,
    RunReport,
    VerificationError,
    VerificationOutcome,
)
