import os
import threading
from pathlib import Path

from page_verification.results import ArtifactWriteError

LOG_KINDS = ("error", "timeout")


class ArtifactStore:
    """
    Owns the output directory.
    Screenshots are <basename>.png, diagnostics are <kind>_<basename>.log.
    Names depend only on the page, so a re-run overwrites instead of adding files.
    """

    def __init__(self, root):
        self.root = Path(root)
        self._lock = threading.Lock()
        self._ready = False

    def ensure_directory(self):
        """Create the directory and any missing parents. Safe to call repeatedly and from several threads."""
        if self._ready:
            return self.root
        with self._lock:
            if not self._ready:
                try:
                    os.makedirs(self.root, exist_ok=True)
                except OSError as e:
                    raise ArtifactWriteError(self.root, e) from e
                self._ready = True
        return self.root

    def screenshot_path_for(self, page) -> Path:
        return self.root / f"{page.basename}.png"

    def log_path_for(self, page, kind) -> Path:
        if kind not in LOG_KINDS:
            raise ValueError(f"Unknown log kind: {kind}")
        return self.root / f"{kind}_{page.basename}.log"

    def artifact_paths_for(self, page):
        return [self.screenshot_path_for(page)] + [self.log_path_for(page, kind) for kind in LOG_KINDS]

    def write_bytes(self, page, path, data: bytes) -> Path:
        self.ensure_directory()
        try:
            Path(path).write_bytes(data)
        except OSError as e:
            raise ArtifactWriteError(path, e, page) from e
        # Keeps exactly one artifact per page across runs; other pages' files are untouched
        self._supersede(page, path)
        return Path(path)

    def write_text(self, page, path, text: str) -> Path:
        self.ensure_directory()
        try:
            Path(path).write_text(text, encoding="utf-8")
        except OSError as e:
            raise ArtifactWriteError(path, e, page) from e
        # Keeps exactly one artifact per page across runs; other pages' files are untouched
        self._supersede(page, path)
        return Path(path)

    def _supersede(self, page, keep):
        # Only this page's own artifacts are removed; the directory itself is never cleared.
        for path in self.artifact_paths_for(page):
            if path == Path(keep):
                continue
            try:
                path.unlink()
            except FileNotFoundError:
                pass
            except OSError as e:
                raise ArtifactWriteError(path, e, page) from e
