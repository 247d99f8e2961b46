"""Dependency entry models for the v1 tree and the v2/v3 packages map."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from collections.abc import Iterator, Mapping
from typing import Any

NODE_MODULES = "node_modules/"


def readonly(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Return an insertion-ordered read-only copy of ``mapping``."""
    return MappingProxyType(dict(mapping or {}))


def _empty() -> Mapping[str, Any]:
    return MappingProxyType({})


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop unset optional values so output mirrors the lock file shape."""
    return {key: value for key, value in data.items() if value not in (None, False, {}, ())}


@dataclass(frozen=True, slots=True)
class V1Dependency:
    """One node of the nested lockfileVersion 1 ``dependencies`` tree.

    Mapping fields are read-only, so instances are unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    name: str
    version: str = ""
    resolved: str | None = None
    integrity: str | None = None
    dev: bool = False
    optional: bool = False
    bundled: bool = False
    requires: Mapping[str, str] = field(default_factory=_empty)
    dependencies: Mapping[str, V1Dependency] = field(default_factory=_empty)

    def __post_init__(self) -> None:
        object.__setattr__(self, "requires", readonly(self.requires))
        object.__setattr__(self, "dependencies", readonly(self.dependencies))

    def iter_tree(self, depth: int = 1) -> Iterator[tuple[int, V1Dependency]]:
        """Yield ``(depth, dependency)`` for this node and its descendants, pre-order."""
        yield depth, self
        for child in self.dependencies.values():
            yield from child.iter_tree(depth + 1)

    def to_dict(self) -> dict[str, object]:
        return _compact(
            {
                "version": self.version,
                "resolved": self.resolved,
                "integrity": self.integrity,
                "dev": self.dev,
                "optional": self.optional,
                "bundled": self.bundled,
                "requires": dict(self.requires),
                "dependencies": {
                    name: child.to_dict() for name, child in self.dependencies.items()
                },
            }
        )


def package_name_from_path(path: str) -> str:
    """Return the package name installed at a ``packages`` path key.

    ``node_modules/@scope/pkg`` gives ``@scope/pkg`` and
    ``node_modules/a/node_modules/b`` gives ``b``. Keys without a
    ``node_modules/`` segment are returned unchanged.
    """
    index = path.rfind(NODE_MODULES)
    if index == -1:
        return path
    return path[index + len(NODE_MODULES) :]


@dataclass(frozen=True, slots=True)
class V2Dependency:
    """One entry of the flat lockfileVersion 2/3 ``packages`` map.

    Mapping fields are read-only, so instances are unhashable.
    """

    __hash__ = None  # type: ignore[assignment]

    path: str
    name: str
    version: str = ""
    resolved: str | None = None
    integrity: str | None = None
    dev: bool = False
    optional: bool = False
    dev_optional: bool = False
    peer: bool = False
    bundled: bool = False
    link: bool = False
    has_install_script: bool = False
    has_shrinkwrap: bool = False
    license: str | None = None
    dependencies: Mapping[str, str] = field(default_factory=_empty)
    optional_dependencies: Mapping[str, str] = field(default_factory=_empty)
    peer_dependencies: Mapping[str, str] = field(default_factory=_empty)
    engines: Mapping[str, str] | None = None
    os: tuple[str, ...] | None = None
    cpu: tuple[str, ...] | None = None
    bin: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        for name in ("dependencies", "optional_dependencies", "peer_dependencies"):
            object.__setattr__(self, name, readonly(getattr(self, name)))
        for name in ("engines", "bin"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, readonly(value))

    @property
    def depth(self) -> int:
        """Number of ``node_modules/`` segments in the path key."""
        return self.path.count(NODE_MODULES)

    def to_dict(self) -> dict[str, object]:
        return _compact(
            {
                "name": self.name,
                "version": self.version,
                "resolved": self.resolved,
                "integrity": self.integrity,
                "link": self.link,
                "dev": self.dev,
                "optional": self.optional,
                "devOptional": self.dev_optional,
                "peer": self.peer,
                "inBundle": self.bundled,
                "hasInstallScript": self.has_install_script,
                "hasShrinkwrap": self.has_shrinkwrap,
                "license": self.license,
                "dependencies": dict(self.dependencies),
                "optionalDependencies": dict(self.optional_dependencies),
                "peerDependencies": dict(self.peer_dependencies),
                "engines": dict(self.engines) if self.engines is not None else None,
                "os": list(self.os) if self.os is not None else None,
                "cpu": list(self.cpu) if self.cpu is not None else None,
                "bin": dict(self.bin) if self.bin is not None else None,
            }
        )
