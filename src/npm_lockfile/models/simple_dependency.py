"""Flattened dependency record."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class SimpleDependency:
    """Name, resolved version and integrity of one installed package.

    Records compare and sort by ``(name, version)`` only.
    """

    name: str
    version: str
    integrity: str | None = field(default=None, compare=False)
    dev: bool = field(default=False, compare=False)
    optional: bool = field(default=False, compare=False)

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"name": self.name, "version": self.version}
        if self.integrity is not None:
            data["integrity"] = self.integrity
        if self.dev:
            data["dev"] = True
        if self.optional:
            data["optional"] = True
        return data
