"""
Merge property resources into a caller-owned configuration store.

Each resource is resolved (file system first, then bundled package), decoded,
parsed as classic flat key=value text by javaproperties, and its entries are
applied to the store under a PropertyAction policy:

- REPLACE: the resource value always wins.
- PRESERVE: a key already present in the store keeps its value.

A missing resource is skipped silently. A resource that exists but cannot be
read, decoded or parsed contributes nothing and is reported after the batch via
PropertiesParseError; the other resources in the batch are still applied.

Example:
    >>> config: dict[str, str] = {}
    >>> load_properties_files(config, ["defaults.properties", "local.properties"])
"""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from enum import Enum

import javaproperties

from sysutil.core.config import Settings, get_settings
from sysutil.core.exceptions import ConfigurationError, PropertiesParseError
from sysutil.core.logging import get_logger
from sysutil.properties.resolvers import (
    ResolvedResource,
    ResourceResolver,
    default_resolvers,
    resolve_resource,
)

logger = get_logger(__name__)


class PropertyAction(Enum):
    """Override policy applied when a loaded key is already in the store."""

    REPLACE = "replace"
    PRESERVE = "preserve"

    @classmethod
    def from_name(cls, name: str) -> PropertyAction:
        """Look an action up by member name, case-insensitively."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown property action {name!r}; expected REPLACE or PRESERVE"
            ) from None


def _parse(resource: ResolvedResource, encoding: str) -> dict[str, str]:
    text = resource.content.decode(encoding)
    return javaproperties.loads(text)


def _apply(
    store: MutableMapping[str, str],
    entries: dict[str, str],
    action: PropertyAction,
) -> None:
    if action is PropertyAction.REPLACE:
        store.update(entries)
        return

    for key, value in entries.items():
        if key not in store:
            store[key] = value


def _load(
    store: MutableMapping[str, str],
    resource_names: Sequence[str],
    action: PropertyAction,
    resolvers: Sequence[ResourceResolver] | None,
    settings: Settings | None,
) -> dict[str, Exception]:
    settings = settings or get_settings()
    chain = resolvers if resolvers is not None else default_resolvers(settings)
    failures: dict[str, Exception] = {}

    for name in resource_names:
        try:
            resource = resolve_resource(name, chain)
        except OSError as exc:
            # found but unreadable: same treatment as a malformed resource
            logger.warning("properties_read_failed", resource=name, error=str(exc))
            failures[name] = exc
            continue

        if resource is None:
            logger.debug("properties_resource_missing", resource=name)
            continue

        try:
            entries = _parse(resource, settings.properties_encoding)
        except ValueError as exc:
            # UnicodeDecodeError and javaproperties.InvalidUEscapeError are both ValueErrors
            logger.warning(
                "properties_parse_failed",
                resource=name,
                origin=resource.origin,
                error=str(exc),
            )
            failures[name] = exc
            continue

        _apply(store, entries, action)
        logger.info(
            "properties_loaded",
            resource=name,
            origin=resource.origin,
            entries=len(entries),
            action=action.name,
        )

    return failures


def load_properties_files(
    store: MutableMapping[str, str],
    resource_names: Sequence[str],
    action: PropertyAction = PropertyAction.REPLACE,
    resolvers: Sequence[ResourceResolver] | None = None,
    settings: Settings | None = None,
) -> None:
    """
    Load several property resources into store, in order.

    Later resources see the store as earlier ones left it, so under PRESERVE
    the first resource to set a key keeps it.

    Args:
        store: Mutable mapping that receives the entries.
        resource_names: Resources to load, in order.
        action: Policy for keys already present in the store.
        resolvers: Resolver chain; built from settings when None.
        settings: Settings to read; the cached settings when None.

    Raises:
        PropertiesParseError: After the whole batch, if any resource was
            found but unreadable or malformed.
    """
    if isinstance(resource_names, str):
        resource_names = [resource_names]

    failures = _load(store, resource_names, action, resolvers, settings)
    if failures:
        raise PropertiesParseError(failures)


def load_properties_file(
    store: MutableMapping[str, str],
    resource_name: str,
    action: PropertyAction = PropertyAction.REPLACE,
    resolvers: Sequence[ResourceResolver] | None = None,
    settings: Settings | None = None,
) -> None:
    """
    Load a single property resource into store.

    A missing resource leaves the store untouched.

    Raises:
        PropertiesParseError: If the resource was found but unreadable or malformed.
    """
    load_properties_files(store, [resource_name], action, resolvers, settings)


def load_configured_properties(
    store: MutableMapping[str, str],
    settings: Settings | None = None,
) -> None:
    """
    Load the resources named by settings.properties_files.

    The policy comes from settings.properties_action. Intended for host
    bootstrap code that is driven entirely by SYSUTIL_* environment variables.

    Raises:
        ConfigurationError: If properties_action names no known policy.
        PropertiesParseError: If any configured resource is malformed.
    """
    settings = settings or get_settings()
    action = PropertyAction.from_name(settings.properties_action)
    load_properties_files(store, settings.properties_files, action, settings=settings)
