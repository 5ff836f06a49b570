# Purpose: Resolve the IronPDF license key for IronPdfEngine and the "auto" engine choice.


from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .config import config_dir, ensure_env_loaded

LICENSE_FILENAME = "license"


def license_candidates() -> list[Path]:
    """Files that may hold the key, checked in order."""
    found: list[Path] = []
    if named := (os.getenv("IRONPDF_LICENSE_FILE") or "").strip():
        found.append(Path(named))
    found.append(config_dir() / LICENSE_FILENAME)
    return found


def get_license() -> Optional[str]:
    """IRONPDF_LICENSE_KEY (env or .env) wins; otherwise the first non-empty candidate file."""
    ensure_env_loaded()
    if key := (os.getenv("IRONPDF_LICENSE_KEY") or "").strip():
        return key
    for path in license_candidates():
        try:
            key = path.read_text(encoding="utf-8").strip()
        except OSError:
            continue
        if key:
            return key
    return None


__all__ = ["LICENSE_FILENAME", "get_license", "license_candidates"]
