"""
Per-page result values and the run-level report.

A page's pipeline never raises for an expected failure. It returns one of
Passed, NavigationFailed, ElementNotVisible, NetworkSettleTimeout,
ScreenshotTimeout or ArtifactWriteFailed, and the orchestrator decides what
to log and how to aggregate from the type of that value.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple, Union

if TYPE_CHECKING:
    from page_verification.pages import PageSpec


class VerificationError(Exception):
    """Base exception for the harness."""


class RegistryError(VerificationError):
    """The page list is empty, incomplete or has clashing entries."""


class ArtifactWriteError(VerificationError):
    """A screenshot or log could not be written. Environment fault, not a site fault."""

    def __init__(self, path, cause, page=None):
        self.path = str(path)
        self.cause = cause
        self.page = page
        super().__init__(f"Could not write artifact {self.path}: {cause}")


class OutcomeStatus(Enum):
    PASS = "PASS"
    NAVIGATION_FAILED = "NAVIGATION_FAILED"
    READINESS_TIMED_OUT = "READINESS_TIMED_OUT"


@dataclass(frozen=True)
class Passed:
    screenshot_path: str


@dataclass(frozen=True)
class NavigationFailed:
    url: str
    status: Optional[int] = None
    status_text: str = ""
    load_timeout: bool = False
    log_path: Optional[str] = None

    kind = "error"
    category = "NavigationFailed"

    @property
    def label(self) -> str:
        return f"{self.category} (load timeout)" if self.load_timeout else self.category


@dataclass(frozen=True)
class ElementNotVisible:
    url: str
    selector: str
    detail: str = ""
    log_path: Optional[str] = None

    kind = "timeout"
    category = "ElementNotVisible"


@dataclass(frozen=True)
class NetworkSettleTimeout:
    url: str
    selector: str
    detail: str = ""
    log_path: Optional[str] = None

    kind = "timeout"
    category = "NetworkSettleTimeout"


@dataclass(frozen=True)
class ScreenshotTimeout:
    """The browser could not produce the image, e.g. a very long page or a crashed target."""
    url: str
    selector: str
    detail: str = ""
    log_path: Optional[str] = None

    kind = "timeout"
    category = "ScreenshotTimeout"


@dataclass(frozen=True)
class ArtifactWriteFailed:
    path: str
    cause: str


PageFailure = Union[NavigationFailed, ElementNotVisible, NetworkSettleTimeout, ScreenshotTimeout]
PageResult = Union[Passed, NavigationFailed, ElementNotVisible, NetworkSettleTimeout, ScreenshotTimeout, ArtifactWriteFailed]


@dataclass(frozen=True)
class VerificationOutcome:
    """
    What one run concluded about one page.
    Invariant: exactly one of screenshot_path / diagnostic_log_path is set.
    """
    page: "PageSpec"
    status: OutcomeStatus
    screenshot_path: Optional[str] = None
    diagnostic_log_path: Optional[str] = None

    def __post_init__(self):
        if (self.screenshot_path is None) == (self.diagnostic_log_path is None):
            raise ValueError(
                f"Outcome for {self.page.path} needs exactly one artifact, got "
                f"screenshot={self.screenshot_path!r} log={self.diagnostic_log_path!r}"
            )
        if (self.status is OutcomeStatus.PASS) != (self.screenshot_path is not None):
            raise ValueError(f"Outcome for {self.page.path}: status {self.status.value} does not match its artifact")

    @property
    def passed(self) -> bool:
        return self.status is OutcomeStatus.PASS

    @property
    def artifact_path(self) -> str:
        return self.screenshot_path or self.diagnostic_log_path


def outcome_from_result(page: "PageSpec", result: PageResult) -> VerificationOutcome:
    """Folds a pipeline result into the outcome recorded for the run."""
    if isinstance(result, Passed):
        return VerificationOutcome(page, OutcomeStatus.PASS, screenshot_path=result.screenshot_path)
    if isinstance(result, NavigationFailed):
        return VerificationOutcome(page, OutcomeStatus.NAVIGATION_FAILED, diagnostic_log_path=result.log_path)
    if isinstance(result, (ElementNotVisible, NetworkSettleTimeout, ScreenshotTimeout)):
        return VerificationOutcome(page, OutcomeStatus.READINESS_TIMED_OUT, diagnostic_log_path=result.log_path)
    raise TypeError(f"No outcome for result {result!r}")


@dataclass(frozen=True)
class RunReport:
    outcomes: Tuple[VerificationOutcome, ...]

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failures(self) -> Tuple[VerificationOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.passed)

    def summary(self) -> str:
        lines = []
        for outcome in self.outcomes:
            lines.append(f"  {outcome.status.value:<20} {outcome.page.name}: {outcome.artifact_path}")
        total = len(self.outcomes)
        lines.append(f"{total - len(self.failures)}/{total} pages passed")
        return "\n".join(lines)
