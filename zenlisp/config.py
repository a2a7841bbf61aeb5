"""Settings read from the process environment.

ZENLISP_PRELUDE_PATH
    os.pathsep-separated directories (or single files) holding `*.zl`
    prelude sources. Defaults to the package's own `prelude/` directory.
ZENLISP_RECURSION_LIMIT
    Python recursion limit applied while an Interpreter evaluates code.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional

PRELUDE_SUFFIX = '.zl'

# Each nested zenlisp call costs roughly ten Python frames
DEFAULT_RECURSION_LIMIT = 20000

_PACKAGE_PRELUDE = Path(__file__).resolve().parent / 'prelude'


def split_path_list(raw: Optional[str]) -> List[Path]:
    """Split an os.pathsep-separated list, skipping blank entries."""
    if not raw:
        return []
    entries = (entry.strip() for entry in raw.split(os.pathsep))
    return [Path(entry) for entry in entries if entry]


def get_prelude_roots() -> List[Path]:
    """Directories (or single files) holding prelude sources, in load order."""
    return split_path_list(os.environ.get('ZENLISP_PRELUDE_PATH')) or [_PACKAGE_PRELUDE]


def get_recursion_limit() -> int:
    raw = os.environ.get('ZENLISP_RECURSION_LIMIT', '').strip()
    if not raw:
        return DEFAULT_RECURSION_LIMIT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"ZENLISP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
