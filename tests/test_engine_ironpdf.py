from __future__ import annotations

import types
from pathlib import Path

import pytest

from htmltopdf.errors import RenderError
from htmltopdf.geometry import A4


class _Options:
    def __init__(self) -> None:
        self.paper_mm = None

    def SetCustomPaperSizeInMillimeters(self, width, height):
        self.paper_mm = (width, height)


class _Renderer:
    fail = False

    def __init__(self) -> None:
        self.RenderingOptions = _Options()
        self.rendered: list[str] = []

    def RenderHtmlFileAsPdf(self, path):
        if self.fail:
            raise RuntimeError("chrome crashed")
        self.rendered.append(path)
        return types.SimpleNamespace(BinaryData=b"%PDF-1.7 iron")


@pytest.fixture
def fake_ironpdf(monkeypatch):
    mod = types.ModuleType("ironpdf")
    mod.ChromePdfRenderer = _Renderer
    mod.License = types.SimpleNamespace(LicenseKey=None)
    mod.PdfCssMediaType = types.SimpleNamespace(Print="print")
    monkeypatch.setitem(__import__("sys").modules, "ironpdf", mod)
    monkeypatch.setenv("IRONPDF_LICENSE_KEY", "KEY-1")
    return mod


def test_license_and_options_applied(fake_ironpdf):
    from htmltopdf.engines.engine_ironpdf import IronPdfEngine

    eng = IronPdfEngine()
    ro = eng._renderer.RenderingOptions
    assert fake_ironpdf.License.LicenseKey == "KEY-1"
    assert ro.CssMediaType == "print"
    assert ro.EnableJavaScript is False


def test_render_converts_points_to_mm(fake_ironpdf, tmp_path: Path):
    from htmltopdf.engines.engine_ironpdf import IronPdfEngine

    doc = tmp_path / "doc.html"
    doc.write_text("<p>x</p>", encoding="utf-8")
    eng = IronPdfEngine(enable_js=True)
    assert eng.render(doc, A4, 12.5) == b"%PDF-1.7 iron"
    ro = eng._renderer.RenderingOptions
    assert ro.paper_mm == pytest.approx((209.98, 296.98), abs=0.01)
    assert ro.MarginTop == pytest.approx(-12.7)
    assert ro.MarginRight == pytest.approx(-12.7)
    assert ro.Timeout == 12
    assert ro.EnableJavaScript is True
    assert eng._renderer.rendered == [str(doc)]


def test_engine_failure_is_render_error(fake_ironpdf, monkeypatch, tmp_path: Path):
    from htmltopdf.engines.engine_ironpdf import IronPdfEngine

    monkeypatch.setattr(_Renderer, "fail", True)
    with pytest.raises(RenderError):
        IronPdfEngine().render(tmp_path / "doc.html", A4, 5)


def test_auto_picks_licensed_ironpdf(fake_ironpdf):
    from htmltopdf.engines.base import get_render_engine
    from htmltopdf.engines.engine_ironpdf import IronPdfEngine

    assert isinstance(get_render_engine("auto"), IronPdfEngine)
