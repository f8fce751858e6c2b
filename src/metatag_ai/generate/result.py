from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Success:
    description: str

    ok = True

    def to_payload(self) -> dict[str, str]:
        return {"description": self.description}


@dataclass(frozen=True)
class Failure:
    error: str

    ok = False

    def to_payload(self) -> dict[str, str]:
        return {"error": self.error}


GenerationResult = Union[Success, Failure]
