from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from ..systems.interfaces import CalendarSystemProtocol


@dataclass
class SystemRegistry:
    _systems: Dict[str, CalendarSystemProtocol]

    def get(self, name: str) -> CalendarSystemProtocol:
        if name not in self._systems:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._systems)}")
        return self._systems[name]

    def list(self) -> List[str]:
        return sorted(self._systems.keys())

    def register(self, name: str, system: CalendarSystemProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._systems):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._systems[name] = system
