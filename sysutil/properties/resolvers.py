"""
Resource resolution for property files.

A resource name is offered to an ordered list of resolvers; the first one
that finds it wins. When none does, the result is None and the caller treats
the resource as absent.

Patterns Applied:
- Protocol typing for duck typing (resolvers need no common base class)
- Strategy chain, first success wins

Default order:
1. FileSystemResolver - path relative to the working directory
2. PackageResourceResolver - bundled resource inside an importable package
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Protocol, Sequence

from sysutil.core.config import Settings, get_settings


@dataclass(frozen=True, slots=True)
class ResolvedResource:
    """
    Raw content of a resource that was found.

    Attributes:
        name: The name the caller asked for.
        origin: Where it was found, e.g. a file path or "package:resource".
        content: The undecoded bytes.
    """

    name: str
    origin: str
    content: bytes


class ResourceResolver(Protocol):
    """Protocol for resource lookup strategies."""

    def resolve(self, name: str) -> ResolvedResource | None:
        """Return the resource if this strategy can find it, else None."""
        ...


class FileSystemResolver:
    """Look a resource name up as a file-system path.

    Relative names are resolved against base_dir, or the current working
    directory at call time when base_dir is None.
    """

    __slots__ = ("_base_dir",)

    def __init__(self, base_dir: Path | str | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else None

    def resolve(self, name: str) -> ResolvedResource | None:
        path = Path(name)
        if self._base_dir is not None and not path.is_absolute():
            path = self._base_dir / path

        if not path.is_file():
            return None

        return ResolvedResource(name=name, origin=str(path), content=path.read_bytes())


class PackageResourceResolver:
    """Look a resource name up among the data files of an importable package.

    This is the bundled-resource fallback: configuration shipped inside a
    host application's package rather than next to the process.
    """

    __slots__ = ("_package",)

    def __init__(self, package: str) -> None:
        self._package = package

    def resolve(self, name: str) -> ResolvedResource | None:
        try:
            root = resources.files(self._package)
        except (ModuleNotFoundError, TypeError):
            # TypeError: the name is a plain module, not a package
            return None

        resource = root.joinpath(*name.split("/"))
        if not resource.is_file():
            return None

        return ResolvedResource(
            name=name,
            origin=f"{self._package}:{name}",
            content=resource.read_bytes(),
        )


def default_resolvers(settings: Settings | None = None) -> list[ResourceResolver]:
    """
    Build the default resolver chain from settings.

    Args:
        settings: Settings to read; the cached settings when None.

    Returns:
        File-system resolver, followed by a package resolver when
        settings.resource_package is set.
    """
    settings = settings or get_settings()
    chain: list[ResourceResolver] = [FileSystemResolver(settings.resource_base_dir)]
    if settings.resource_package:
        chain.append(PackageResourceResolver(settings.resource_package))
    return chain


def resolve_resource(
    name: str,
    resolvers: Sequence[ResourceResolver],
) -> ResolvedResource | None:
    """Offer name to each resolver in turn; None when every one misses."""
    for resolver in resolvers:
        found = resolver.resolve(name)
        if found is not None:
            return found
    return None
