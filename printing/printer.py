# printing/printer.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping


@dataclass(frozen=True)
class Capabilities:
    """
    Snapshot of what a printer accepts.

    - `max_copies` is the largest copy count the printer takes in one job.
    - `papers` maps paper keys to whatever the backend reports for them (usually dimensions).
    - DPI values are kept as strings so 600 and "600" compare equal.
    """

    max_copies: int = 1
    papers: Mapping[str, Any] = field(default_factory=dict)
    medias: FrozenSet[str] = frozenset()
    dpis: FrozenSet[str] = frozenset()
    color: bool = False

    @staticmethod
    def from_dict(data: Mapping[str, Any] | None) -> "Capabilities":
        data = data or {}
        papers = data.get("papers") or {}
        if not isinstance(papers, Mapping):
            # Some backends send a plain list of paper names
            papers = {name: None for name in papers}

        return Capabilities(
            max_copies=int(data.get("copies") or 1),
            papers=dict(papers),
            medias=frozenset(data.get("medias") or ()),
            dpis=frozenset(str(dpi) for dpi in data.get("dpis") or ()),
            color=bool(data.get("color", False)),
        )

    def supports_paper(self, paper: str) -> bool:
        return paper in self.papers

    def supports_media(self, media: str) -> bool:
        return media in self.medias

    def supports_dpi(self, dpi: Any) -> bool:
        return str(dpi) in self.dpis

    def to_dict(self) -> dict:
        return {
            "copies": self.max_copies,
            "papers": dict(self.papers),
            "medias": sorted(self.medias),
            "dpis": sorted(self.dpis),
            "color": self.color,
        }


@dataclass(frozen=True)
class Printer:
    id: int | str
    name: str
    online: bool = False
    capabilities: Capabilities = field(default_factory=Capabilities)

    def is_online(self) -> bool:
        return self.online

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Printer":
        """Build a printer from the backend representation (`state` == "online" means online)."""
        if "online" in data:
            online = bool(data["online"])
        else:
            online = data.get("state") == "online"

        return Printer(
            id=data["id"],
            name=data.get("name") or "",
            online=online,
            capabilities=Capabilities.from_dict(data.get("capabilities")),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "state": "online" if self.online else "offline",
            "capabilities": self.capabilities.to_dict(),
        }
