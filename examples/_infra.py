from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from apply_also import Also, Apply  # noqa: E402


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


def _empty_headers() -> dict[str, str]:
    return {}


@dataclass(slots=True)
class Request(Apply, Also):
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=_empty_headers)
    body: bytes = b""


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
