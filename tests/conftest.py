from __future__ import annotations

# Ensures `import htmltopdf` works when running `pytest` from repo root or a parent folder.
# This keeps tests hermetic without relying on PYTHONPATH being set by the shell.
import sys
import threading
from pathlib import Path

import pytest

# project root = parent of this tests/ directory
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


class FakeEngine:
    """Stands in for a browser: echoes the loaded HTML inside a minimal PDF header."""

    thread_safe = True

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.fail_with = fail_with
        self.documents: list[Path] = []
        self.pages = []
        self.timeouts: list[float] = []
        self._lock = threading.Lock()

    def render(self, document: Path, page, timeout: float) -> bytes:
        assert document.exists(), "engine must see the temporary document"
        html = document.read_text(encoding="utf-8")
        with self._lock:
            self.documents.append(document)
            self.pages.append(page)
            self.timeouts.append(timeout)
        if self.fail_with is not None:
            raise self.fail_with
        return b"%PDF-1.4\n%" + html.encode("utf-8") + b"\n%%EOF\n"


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path):
    from htmltopdf import config

    for name in (
        "HTMLTOPDF_ENGINE", "HTMLTOPDF_TIMEOUT_S", "HTMLTOPDF_WORKERS",
        "HTMLTOPDF_ENABLE_JS", "HTMLTOPDF_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # .env files are loaded explicitly by the tests that need them.
    monkeypatch.setattr(config, "_env_loaded", True)
    temp_dir = tmp_path / "tmp-html"
    temp_dir.mkdir()
    monkeypatch.setenv("HTMLTOPDF_TEMP_DIR", str(temp_dir))
    return temp_dir


@pytest.fixture
def html_temp_dir(_clean_env) -> Path:
    return _clean_env


class GuiBoundEngine(FakeEngine):
    """Like FakeEngine but declares itself tied to the GUI thread, as Qt WebEngine does."""

    thread_safe = False

    def __init__(self, fail_with: Exception | None = None) -> None:
        super().__init__(fail_with)
        self.threads: set[int] = set()

    def render(self, document: Path, page, timeout: float) -> bytes:
        self.threads.add(threading.get_ident())
        return super().render(document, page, timeout)
