"""
Declarative list of pages to verify and the element that proves each one rendered.
"""

import json
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Iterable, Tuple

from page_verification.results import RegistryError


@dataclass(frozen=True)
class PageSpec:
    name: str
    path: str
    selector: str

    @property
    def basename(self) -> str:
        """File name without its extension, e.g. 'case-studies' for 'case-studies.html'."""
        return PurePosixPath(self.path).stem

    def url(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}/{self.path.lstrip('/')}"


DEFAULT_PAGES = (
    PageSpec("Home", "index.html", "h1"),
    PageSpec("Metodología", "methodology.html", "h1"),
    PageSpec("Casos de Éxito", "case-studies.html", 'img[alt="Nabolic Fitness Gym Interior"]'),
    PageSpec("Recursos", "resources.html", "h1"),
    PageSpec("Diagnóstico", "diagnosis.html", "h1"),
    PageSpec("Términos de Uso", "terms.html", "h1"),
    PageSpec("Política de Privacidad", "privacy.html", "h1"),
)


def validate_pages(pages: Iterable[PageSpec]) -> Tuple[PageSpec, ...]:
    """
    Returns the pages as a tuple, in the given order.
    Raises RegistryError if the list is empty, a field is blank, or two pages
    would share a path or an artifact name.
    """
    pages = tuple(pages)
    if not pages:
        raise RegistryError("No pages to verify")

    seen_paths = set()
    seen_basenames = {}
    for spec in pages:
        if not spec.name or not spec.path or not spec.selector:
            raise RegistryError(f"Incomplete page entry: {spec!r}")
        if spec.path in seen_paths:
            raise RegistryError(f"Duplicate page path: {spec.path}")
        if spec.basename in seen_basenames:
            raise RegistryError(
                f"Pages {seen_basenames[spec.basename]} and {spec.path} "
                f"would share artifact name '{spec.basename}'"
            )
        seen_paths.add(spec.path)
        seen_basenames[spec.basename] = spec.path
    return pages


def load_pages(path) -> Tuple[PageSpec, ...]:
    """Reads a JSON list of {"name", "path", "selector"} objects."""
    with open(path, encoding="utf-8") as f:
        try:
            entries = json.load(f)
        except json.JSONDecodeError as e:
            raise RegistryError(f"Invalid page list {path}: {e}") from e

    if not isinstance(entries, list):
        raise RegistryError(f"Page list {path} must be a JSON array")

    pages = []
    for entry in entries:
        try:
            pages.append(PageSpec(entry["name"], entry["path"], entry["selector"]))
        except (KeyError, TypeError) as e:
            raise RegistryError(f"Invalid page entry in {path}: {entry!r}") from e
    return validate_pages(pages)
