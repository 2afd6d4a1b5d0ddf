"""Template file loading."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_template_text(path: str | Path) -> str:
    """Read a UTF-8 template file, dropping a leading byte-order mark."""
    file_path = Path(path)
    decoded = file_path.read_bytes().decode("utf-8")
    had_bom = decoded.startswith("\ufeff")
    if had_bom:
        logger.debug("Stripped byte-order mark from %s", file_path)
    return decoded[1:] if had_bom else decoded
