"""
HTML -> PDF bridge.

Public API:
    convert(html, destination, page=A4, engine=None, *, timeout=None, temp_dir=None) -> Path
    convert_to_directory(html, title, directory, page=A4, engine=None, **kw) -> Path
    convert_many(jobs, page=A4, *, engine_factory=None, workers=None, timeout=None)
        -> list[ConversionResult]

Behavior:
- HTML is written as UTF-8 to a uniquely named temp file, handed to the engine,
  and removed on every exit path.
- The destination is overwritten if it exists; parent folders are not created.
- Engines with thread_safe=False (Qt WebEngine) are refused off the main thread.
- Settings come from HTMLTOPDF_* variables; .env files are read once on first use
  (see config.load_env).
- Failures surface as ConversionError subclasses (WriteError, RenderError,
  CleanupError, ConversionTimeoutError).
"""
from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .config import Settings
from .engines.base import EngineFactory, EnginePool, RenderEngine, get_render_engine
from .errors import ConversionError, RenderError, WriteError
from .geometry import A4, PageConfiguration
from .messages import MAIN_THREAD_ONLY, PDF_ENGINE_FAILED, PDF_WRITE_FAILED
from .tempdoc import TemporaryDocument

log = logging.getLogger("htmltopdf.converter")

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class ConversionResult:
    destination: Path
    error: Optional[ConversionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def pdf_path_for(directory: PathLike, title: str) -> Path:
    return Path(directory) / f"{title}.pdf"


def _write_pdf(destination: Path, data: bytes) -> None:
    try:
        destination.write_bytes(data)
    except OSError as e:
        raise WriteError(PDF_WRITE_FAILED, f"{destination}: {e.strerror or e}") from e


def _check_timeout(timeout: float) -> float:
    if not timeout > 0:
        raise ValueError(f"timeout must be positive, got {timeout!r}")
    return timeout


def convert(
    html: str,
    destination: PathLike,
    page: PageConfiguration = A4,
    engine: Optional[RenderEngine] = None,
    *,
    timeout: Optional[float] = None,
    temp_dir: Optional[PathLike] = None,
) -> Path:
    """Render `html` into a PDF at `destination` and return that path."""
    out_path = Path(destination)
    if timeout is None or temp_dir is None:
        settings = Settings.from_env()
        timeout = settings.timeout_s if timeout is None else timeout
        temp_dir = settings.temp_dir if temp_dir is None else temp_dir
    _check_timeout(timeout)
    if engine is None:
        engine = get_render_engine()
    if not getattr(engine, "thread_safe", False) and threading.current_thread() is not threading.main_thread():
        raise RenderError(MAIN_THREAD_ONLY, type(engine).__name__)

    log.info("Converting HTML (%d chars) -> %s", len(html), out_path)
    with TemporaryDocument(html, Path(temp_dir) if temp_dir is not None else None) as document:
        try:
            pdf = engine.render(document, page, timeout)
        except ConversionError:
            raise
        except Exception as e:
            raise RenderError(PDF_ENGINE_FAILED, str(e)) from e
        _write_pdf(out_path, pdf)
    log.info("Wrote %s (%d bytes)", out_path, len(pdf))
    return out_path


def convert_to_directory(
    html: str,
    title: str,
    directory: PathLike,
    page: PageConfiguration = A4,
    engine: Optional[RenderEngine] = None,
    **kwargs,
) -> Path:
    return convert(html, pdf_path_for(directory, title), page, engine, **kwargs)


def convert_many(
    jobs: Iterable[Tuple[str, PathLike]],
    page: PageConfiguration = A4,
    *,
    engine_factory: Optional[EngineFactory] = None,
    workers: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[ConversionResult]:
    """Convert several documents, collecting a result per job in input order.

    GUI-bound engines (thread_safe=False) run serially on the calling thread
    through one reused instance; thread-safe engines run on a worker pool
    with one engine per in-flight conversion. Engine construction failures
    are reported on the jobs they hit.
    """
    tasks = [(html, Path(dest)) for html, dest in jobs]
    if not tasks:
        return []
    settings = Settings.from_env()
    workers = workers or settings.workers
    timeout = _check_timeout(settings.timeout_s if timeout is None else timeout)
    pool = EnginePool(engine_factory or get_render_engine, min(workers, len(tasks)))

    def _job(task: Tuple[str, Path]) -> ConversionResult:
        html, dest = task
        try:
            with pool.engine() as eng:
                convert(html, dest, page, eng, timeout=timeout, temp_dir=settings.temp_dir)
        except ConversionError as e:
            log.warning("Conversion to %s failed: %s", dest, e)
            return ConversionResult(dest, e)
        return ConversionResult(dest)

    try:
        with pool.engine() as first:
            parallel = bool(getattr(first, "thread_safe", False)) and pool.size > 1
    except ConversionError as e:
        log.warning("No engine for batch of %d: %s", len(tasks), e)
        return [ConversionResult(dest, e) for _, dest in tasks]

    if not parallel:
        # WebEngine is not thread-safe off the GUI thread; never parallelize it.
        results = [_job(t) for t in tasks]
    else:
        with ThreadPoolExecutor(max_workers=pool.size, thread_name_prefix="pdf") as executor:
            results = list(executor.map(_job, tasks))

    done = sum(r.ok for r in results)
    log.info("Batch finished: %d/%d converted", done, len(results))
    return results


__all__ = ["ConversionResult", "convert", "convert_many", "convert_to_directory", "pdf_path_for"]
