from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

UNKNOWN_VERSION = "Unknown"


@dataclass
class UpgradeCandidate:
    name: str
    id: str
    current_version: str
    available_version: str = UNKNOWN_VERSION
    selected: bool = False

    def label(self) -> str:
        return f"{self.name} ({self.current_version} -> {self.available_version})"


def find_candidate(candidates: Iterable[UpgradeCandidate], pkg_id: str) -> Optional[UpgradeCandidate]:
    for c in candidates:
        if c.id == pkg_id:
            return c
    return None
