# Purpose: IronPDF engine wrapper (loaded opportunistically by the factory).
# Avoids importing ironpdf at module level so environments without it still work.


from __future__ import annotations

import logging
from pathlib import Path

from ..errors import RenderError
from ..geometry import PageConfiguration, points_to_mm
from ..messages import PDF_ENGINE_FAILED

log = logging.getLogger("htmltopdf.engines.engine_ironpdf")


class IronPdfEngine:
    # One renderer per instance; the pool gives each worker its own instance.
    thread_safe = True

    def __init__(self, enable_js: bool | None = None) -> None:
        from ironpdf import ChromePdfRenderer, License, PdfCssMediaType
        from ..config import Settings
        from ..licensing import get_license

        key = get_license()
        if key:
            # IronPDF picks the license up from env as well; we also set it programmatically.
            License.LicenseKey = key
        self._renderer = ChromePdfRenderer()
        ro = self._renderer.RenderingOptions
        ro.CssMediaType = PdfCssMediaType.Print
        if enable_js is None:
            enable_js = Settings.from_env().enable_js
        ro.EnableJavaScript = bool(enable_js)

    def _apply_page(self, page: PageConfiguration) -> None:
        ro = self._renderer.RenderingOptions
        ro.SetCustomPaperSizeInMillimeters(points_to_mm(page.page_width), points_to_mm(page.page_height))
        m = page.margins
        ro.MarginTop = points_to_mm(m.top)
        ro.MarginLeft = points_to_mm(m.left)
        ro.MarginBottom = points_to_mm(m.bottom)
        ro.MarginRight = points_to_mm(m.right)

    def render(self, document: Path, page: PageConfiguration, timeout: float) -> bytes:
        # IronPDF renders synchronously; its own Chrome timeout applies.
        ro = self._renderer.RenderingOptions
        ro.Timeout = max(1, int(timeout))
        self._apply_page(page)
        try:
            pdf = self._renderer.RenderHtmlFileAsPdf(str(document))
            data = bytes(pdf.BinaryData)
        except Exception as e:
            log.warning("IronPDF failed on %s: %s", document.name, e)
            raise RenderError(PDF_ENGINE_FAILED, str(e)) from e
        if not data:
            raise RenderError(PDF_ENGINE_FAILED, "empty PDF data")
        return data


__all__ = ["IronPdfEngine"]
