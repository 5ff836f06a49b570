# Purpose: Pluggable engine interface, a bounded engine pool, and the factory that
# picks IronPDF (if installed and licensed) or Qt WebEngine.


from __future__ import annotations

import importlib
import logging
import queue
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, Protocol

from ..errors import RenderError
from ..geometry import PageConfiguration
from ..messages import NO_ENGINE

log = logging.getLogger("htmltopdf.engines")


class RenderEngine(Protocol):
    # False for engines bound to a GUI thread; callers must not share them across threads.
    thread_safe: bool

    def render(self, document: Path, page: PageConfiguration, timeout: float) -> bytes:
        """Load `document`, wait for navigation to finish, return the PDF bytes."""
        ...


EngineFactory = Callable[[], RenderEngine]


class EnginePool:
    """Hands out at most `size` engines, one conversion per engine at a time."""

    def __init__(self, factory: EngineFactory, size: int) -> None:
        if size < 1:
            raise ValueError("pool size must be at least 1")
        self._factory = factory
        self._size = size
        self._created = 0
        self._idle: "queue.Queue[RenderEngine]" = queue.Queue()
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        return self._size

    @property
    def created(self) -> int:
        return self._created

    def _checkout(self) -> RenderEngine:
        try:
            return self._idle.get_nowait()
        except queue.Empty:
            pass
        with self._lock:
            if self._created < self._size:
                self._created += 1
                build = True
            else:
                build = False
        if not build:
            return self._idle.get()
        try:
            return self._factory()
        except BaseException:
            with self._lock:
                self._created -= 1
            raise

    @contextmanager
    def engine(self) -> Iterator[RenderEngine]:
        eng = self._checkout()
        try:
            yield eng
        finally:
            self._idle.put(eng)


def _try_ironpdf() -> Optional[RenderEngine]:
    try:
        # Import lazily to avoid hard dependency when IronPDF isn't installed.
        importlib.import_module("ironpdf")
        from .engine_ironpdf import IronPdfEngine
        from ..licensing import get_license
    except Exception as e:
        log.debug("IronPDF unavailable: %s", e)
        return None
    if not get_license():
        log.debug("IronPDF installed but no license found; skipping")
        return None
    try:
        return IronPdfEngine()
    except Exception as e:
        # Could not initialize (e.g. native download failed).
        log.debug("IronPDF init failed: %s", e)
        return None


def _try_webengine() -> Optional[RenderEngine]:
    try:
        from .engine_web import WebEnginePdf
        return WebEnginePdf()
    except Exception as e:
        log.debug("Qt WebEngine unavailable: %s", e)
        return None


def _build(name: str) -> RenderEngine:
    try:
        if name == "ironpdf":
            from .engine_ironpdf import IronPdfEngine
            return IronPdfEngine()
        from .engine_web import WebEnginePdf
        return WebEnginePdf()
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(NO_ENGINE, f"{name}: {e}") from e


def get_render_engine(name: Optional[str] = None) -> RenderEngine:
    """Return the requested engine, or the best available one for "auto"."""
    if name is None:
        from ..config import Settings
        name = Settings.from_env().engine
    name = name.strip().lower()
    if name in ("webengine", "ironpdf"):
        eng = _build(name)
    elif name == "auto":
        eng = _try_ironpdf() or _try_webengine()
        if eng is None:
            # Make failure explicit so callers don't get a NoneType later.
            raise RenderError(NO_ENGINE)
    else:
        raise ValueError(f"unknown engine {name!r}")
    log.info("Using PDF engine %s", type(eng).__name__)
    return eng


__all__ = ["EngineFactory", "EnginePool", "RenderEngine", "get_render_engine"]
