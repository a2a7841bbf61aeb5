from __future__ import annotations
from pathlib import Path
from typing import Iterator, Protocol

from zenlisp.config import get_prelude_roots, PRELUDE_SUFFIX


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_files() -> Iterator[Path]:
    """Yield prelude sources: each configured file, then each directory's *.zl sorted by name."""
    for root in get_prelude_roots():
        if root.is_file():
            yield root
        elif root.is_dir():
            yield from sorted(root.glob(f"*{PRELUDE_SUFFIX}"))


def load_prelude(itp: _HasEvalPrelude) -> list[Path]:
    loaded = []
    for path in prelude_files():
        itp.eval_prelude(path.read_text(encoding='utf-8'))
        loaded.append(path)
    return loaded
