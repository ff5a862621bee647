"""Read bundle descriptors from exploded directories and archives."""

from __future__ import annotations

import zipfile
import zlib
from typing import Any, Optional

from bundlemeta.config import BundleProperties
from bundlemeta.coordinates import BundleCoordinates
from bundlemeta.descriptor import BundleDescriptor
from bundlemeta.errors import ResourceAccessError
from bundlemeta.logging import setup_logging
from bundlemeta.manifest import Manifest, parse_manifest
from bundlemeta.resolver import descriptor_from_manifest, resolve_coordinates
from bundlemeta.sources import (
    MANIFEST_PATH,
    ArchiveBundleSource,
    BundleSource,
    DirectoryBundleSource,
    open_bundle_source,
)

logger = setup_logging()


def read_manifest(source: BundleSource) -> Manifest:
    """Open, read and parse the manifest of ``source``.

    The stream is closed before this returns or raises.

    Raises:
        ResourceAccessError: If the manifest is missing or cannot be read.
        ManifestParseError: If the manifest text is malformed.
    """
    location = source.describe(MANIFEST_PATH)
    logger.debug("Reading manifest %s", location)
    with source.open_resource(MANIFEST_PATH) as stream:
        try:
            data = stream.read()
        except (OSError, EOFError, zipfile.BadZipFile, zlib.error) as e:
            raise ResourceAccessError(f"failed reading manifest file {location}: {e}", location=location) from e
        return parse_manifest(data)


def _describe(source: BundleSource, properties: BundleProperties) -> BundleDescriptor:
    manifest = read_manifest(source)
    descriptor = descriptor_from_manifest(source.location, manifest, properties.meta_id_prefix)
    logger.debug("Read %s from %s", descriptor.coordinates, source.describe(MANIFEST_PATH))
    return descriptor


def from_bundle_directory(bundle_directory: Any, properties: BundleProperties) -> BundleDescriptor:
    """Create a descriptor from an exploded bundle directory.

    Args:
        bundle_directory: Directory containing ``META-INF/MANIFEST.MF``.
        properties: Settings supplying the identity key prefix.

    Returns:
        The descriptor built from the manifest's main attributes.

    Raises:
        InvalidBundleReferenceError: If ``bundle_directory`` is None.
        ResourceAccessError: If the directory or manifest cannot be read.
        ManifestParseError: If the manifest is malformed.
    """
    return _describe(DirectoryBundleSource(bundle_directory), properties)


def from_bundle_file(bundle_file: Any, properties: BundleProperties) -> BundleDescriptor:
    """Create a descriptor from a bundle archive.

    The archive is mounted only for the duration of the call.

    Raises:
        InvalidBundleReferenceError: If ``bundle_file`` is None.
        ResourceAccessError: If the archive or manifest cannot be read.
        ManifestParseError: If the manifest is malformed.
    """
    return _describe(ArchiveBundleSource(bundle_file), properties)


def coordinates_from_bundle_file(bundle_file: Any, properties: BundleProperties) -> BundleCoordinates:
    """Read only the bundle's own coordinates from an archive."""
    manifest = read_manifest(ArchiveBundleSource(bundle_file))
    return resolve_coordinates(manifest, properties.meta_id_prefix)


def read_bundle_descriptor(location: Any, properties: Optional[BundleProperties] = None) -> BundleDescriptor:
    """Create a descriptor from a directory or archive, whichever ``location`` is."""
    properties = properties or BundleProperties()
    return _describe(open_bundle_source(location, properties), properties)
