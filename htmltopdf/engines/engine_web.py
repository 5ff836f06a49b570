# Purpose: Default engine backed by Qt WebEngine (PySide6). GUI-thread only.


from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path
from typing import Any, Optional

from PySide6.QtCore import QCoreApplication, QEventLoop, QMarginsF, QSizeF, Qt, QTimer, QUrl
from PySide6.QtGui import QPageLayout, QPageSize
from PySide6.QtWebEngineCore import QWebEnginePage
from PySide6.QtWidgets import QApplication

from ..errors import ConversionTimeoutError, RenderError
from ..geometry import PageConfiguration
from ..messages import ENGINE_BUSY, LOAD_FAILED, MAIN_THREAD_ONLY, PDF_ENGINE_FAILED, TIMED_OUT

log = logging.getLogger("htmltopdf.engines.engine_web")

_app: Optional[QCoreApplication] = None


def ensure_qt_app() -> QCoreApplication:
    """Return the running QApplication, creating a headless-friendly one if needed."""
    global _app
    app = QApplication.instance()
    if app is not None:
        return app
    if sys.platform.startswith("linux") and not (os.getenv("DISPLAY") or os.getenv("WAYLAND_DISPLAY")):
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    # Must be set before the application object exists.
    QCoreApplication.setAttribute(Qt.ApplicationAttribute.AA_ShareOpenGLContexts, True)
    _app = QApplication(sys.argv[:1] or ["htmltopdf"])
    return _app


def page_layout(page: PageConfiguration) -> QPageLayout:
    """Output page = printable rectangle, no further margins."""
    size = QPageSize(
        QSizeF(page.width, page.height),
        QPageSize.Unit.Point,
        "",
        QPageSize.SizeMatchPolicy.ExactMatch,
    )
    layout = QPageLayout(
        size,
        QPageLayout.Orientation.Portrait,
        QMarginsF(0, 0, 0, 0),
        QPageLayout.Unit.Point,
    )
    layout.setMode(QPageLayout.Mode.FullPageMode)
    return layout


class WebEnginePdf:
    thread_safe = False

    def __init__(self) -> None:
        # Qt aborts the process when the application is created off the main thread.
        if threading.current_thread() is not threading.main_thread():
            raise RenderError(MAIN_THREAD_ONLY, "WebEnginePdf")
        ensure_qt_app()
        self._page = QWebEnginePage()
        self._busy = False

    def render(self, document: Path, page: PageConfiguration, timeout: float) -> bytes:
        if self._busy:
            raise RenderError(ENGINE_BUSY)
        self._busy = True
        try:
            return self._render(document, page, timeout)
        finally:
            self._busy = False

    def _render(self, document: Path, page: PageConfiguration, timeout: float) -> bytes:
        web = self._page
        loop = QEventLoop()
        timer = QTimer()
        timer.setSingleShot(True)
        # loaded: None until the first loadFinished; later emissions are ignored.
        state: dict[str, Any] = {"loaded": None, "pdf": None, "timed_out": False}

        def on_pdf(data) -> None:
            if state["pdf"] is None:
                state["pdf"] = bytes(data.data()) if hasattr(data, "data") else bytes(data)
                loop.quit()

        def on_loaded(ok: bool) -> None:
            if state["loaded"] is not None:
                return
            state["loaded"] = bool(ok)
            if not ok:
                loop.quit()
                return
            web.printToPdf(on_pdf, page_layout(page))

        def on_timeout() -> None:
            state["timed_out"] = True
            loop.quit()

        web.loadFinished.connect(on_loaded)
        timer.timeout.connect(on_timeout)
        try:
            timer.start(int(timeout * 1000))
            web.load(QUrl.fromLocalFile(str(document)))
            loop.exec()
        finally:
            timer.stop()
            web.loadFinished.disconnect(on_loaded)

        if state["timed_out"] and state["pdf"] is None:
            web.triggerAction(QWebEnginePage.WebAction.Stop)
            log.warning("WebEngine timed out after %.1fs on %s", timeout, document.name)
            raise ConversionTimeoutError(TIMED_OUT, f"{timeout:g}s")
        if not state["loaded"]:
            raise RenderError(LOAD_FAILED, str(document))
        pdf = state["pdf"] or b""
        if not pdf:
            raise RenderError(PDF_ENGINE_FAILED, "empty PDF data")
        return pdf


__all__ = ["WebEnginePdf", "ensure_qt_app", "page_layout"]
