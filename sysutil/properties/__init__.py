"""Property resource loading and typed property accessors."""

from sysutil.properties.accessors import (
    get_duration_in_nanos,
    get_size_as_int,
    get_size_as_long,
)
from sysutil.properties.loader import (
    PropertyAction,
    load_configured_properties,
    load_properties_file,
    load_properties_files,
)
from sysutil.properties.resolvers import (
    FileSystemResolver,
    PackageResourceResolver,
    ResolvedResource,
    ResourceResolver,
)

__all__ = [
    "FileSystemResolver",
    "PackageResourceResolver",
    "PropertyAction",
    "ResolvedResource",
    "ResourceResolver",
    "get_duration_in_nanos",
    "get_size_as_int",
    "get_size_as_long",
    "load_configured_properties",
    "load_properties_file",
    "load_properties_files",
]
