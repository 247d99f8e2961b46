"""Top-level parsed lock file model."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from collections.abc import Mapping

from .dependency import V1Dependency, V2Dependency, readonly


class LockVersion(IntEnum):
    """Supported ``lockfileVersion`` values."""

    V1 = 1
    V2 = 2
    V3 = 3

    @property
    def has_dependencies_tree(self) -> bool:
        return self in (LockVersion.V1, LockVersion.V2)

    @property
    def has_packages_map(self) -> bool:
        return self in (LockVersion.V2, LockVersion.V3)


@dataclass(frozen=True, slots=True)
class LockDocument:
    """Normalised view of a package-lock.json file.

    ``v1_dependencies`` is only populated for lockfileVersion 1 and 2,
    ``v2_dependencies`` only for lockfileVersion 2 and 3.
    Instances are unhashable because they hold mappings.
    """

    __hash__ = None  # type: ignore[assignment]

    lockfile_version: LockVersion
    name: str = ""
    version: str = ""
    requires: bool = False
    v1_dependencies: Mapping[str, V1Dependency] = field(default_factory=dict)
    v2_dependencies: Mapping[str, V2Dependency] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.lockfile_version.has_dependencies_tree and self.v1_dependencies:
            raise ValueError(
                f"lockfileVersion {int(self.lockfile_version)} cannot carry v1 dependencies"
            )
        if not self.lockfile_version.has_packages_map and self.v2_dependencies:
            raise ValueError(
                f"lockfileVersion {int(self.lockfile_version)} cannot carry v2 packages"
            )
        object.__setattr__(self, "v1_dependencies", readonly(self.v1_dependencies))
        object.__setattr__(self, "v2_dependencies", readonly(self.v2_dependencies))

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "name": self.name,
            "version": self.version,
            "lockfileVersion": int(self.lockfile_version),
        }
        if self.requires:
            data["requires"] = True
        if self.lockfile_version.has_packages_map:
            data["packages"] = {
                path: dependency.to_dict() for path, dependency in self.v2_dependencies.items()
            }
        if self.lockfile_version.has_dependencies_tree:
            data["dependencies"] = {
                name: dependency.to_dict() for name, dependency in self.v1_dependencies.items()
            }
        return data
