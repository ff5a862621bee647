"""
bundlemeta - Bundle Manifest Descriptors.

Reads the flat ``META-INF/MANIFEST.MF`` attribute block of a bundle (an
exploded directory or a ZIP archive) and turns it into an immutable
descriptor: the bundle's coordinates, the coordinates of the bundle it
depends on, and its build provenance.

Example:
    from bundlemeta import BundleProperties, from_bundle_directory

    properties = BundleProperties(meta_id_prefix="bundle-identity.")
    descriptor = from_bundle_directory(Path("sample-bundle"), properties)
    print(descriptor.coordinates.coordinate)
"""

from bundlemeta.config import BundleProperties, load_bundle_properties
from bundlemeta.coordinates import DEFAULT_GROUP, DEFAULT_VERSION, BundleCoordinates
from bundlemeta.descriptor import BundleDescriptor, DescriptorFields, build_descriptor
from bundlemeta.entries import ManifestEntry
from bundlemeta.errors import (
    BundleMetaError,
    IncompleteDescriptorError,
    InvalidBundleReferenceError,
    ManifestParseError,
    ResourceAccessError,
)
from bundlemeta.manifest import Manifest, parse_manifest
from bundlemeta.reader import (
    coordinates_from_bundle_file,
    from_bundle_directory,
    from_bundle_file,
    read_bundle_descriptor,
    read_manifest,
)
from bundlemeta.resolver import (
    descriptor_from_manifest,
    resolve_coordinates,
    resolve_dependency_coordinates,
)
from bundlemeta.sources import (
    MANIFEST_PATH,
    ArchiveBundleSource,
    BundleSource,
    DirectoryBundleSource,
    open_bundle_source,
)

__all__ = [
    "BundleCoordinates",
    "BundleDescriptor",
    "BundleProperties",
    "BundleSource",
    "DirectoryBundleSource",
    "ArchiveBundleSource",
    "DescriptorFields",
    "Manifest",
    "ManifestEntry",
    "MANIFEST_PATH",
    "DEFAULT_GROUP",
    "DEFAULT_VERSION",
    "build_descriptor",
    "coordinates_from_bundle_file",
    "descriptor_from_manifest",
    "from_bundle_directory",
    "from_bundle_file",
    "load_bundle_properties",
    "open_bundle_source",
    "parse_manifest",
    "read_bundle_descriptor",
    "read_manifest",
    "resolve_coordinates",
    "resolve_dependency_coordinates",
    "BundleMetaError",
    "IncompleteDescriptorError",
    "InvalidBundleReferenceError",
    "ManifestParseError",
    "ResourceAccessError",
]

__version__ = "0.1.0"
