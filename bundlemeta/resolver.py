"""Map manifest attributes to coordinates and descriptors.

Identity keys are looked up under the configured prefix; build provenance
keys are read without it. A blank value counts as absent only for the
dependency id: a blank group or version is kept as given.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from bundlemeta.coordinates import BundleCoordinates
from bundlemeta.descriptor import BundleDescriptor, DescriptorFields, build_descriptor
from bundlemeta.entries import ManifestEntry
from bundlemeta.manifest import Manifest

Attributes = Mapping[str, str]


def _attributes(source: Manifest | Attributes) -> Attributes:
    if isinstance(source, Manifest):
        return source.main_attributes
    return source


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def resolve_coordinates(attributes: Manifest | Attributes, prefix: str) -> BundleCoordinates:
    """Resolve the bundle's own coordinates under ``prefix``."""
    attrs = _attributes(attributes)
    return BundleCoordinates(
        group=attrs.get(ManifestEntry.PRE_GROUP.key(prefix)),
        id=attrs.get(ManifestEntry.PRE_ID.key(prefix)),
        version=attrs.get(ManifestEntry.PRE_VERSION.key(prefix)),
    )


def resolve_dependency_coordinates(attributes: Manifest | Attributes, prefix: str) -> Optional[BundleCoordinates]:
    """Resolve the declared dependency, or ``None`` if its id is absent or blank."""
    attrs = _attributes(attributes)
    dependency_id = attrs.get(ManifestEntry.PRE_DEPENDENCY_ID.key(prefix))
    if _is_blank(dependency_id):
        return None
    return BundleCoordinates(
        group=attrs.get(ManifestEntry.PRE_DEPENDENCY_GROUP.key(prefix)),
        id=dependency_id,
        version=attrs.get(ManifestEntry.PRE_DEPENDENCY_VERSION.key(prefix)),
    )


def descriptor_from_manifest(bundle_location: Any, manifest: Manifest | Attributes, prefix: str) -> BundleDescriptor:
    """Assemble the descriptor for a bundle from its parsed manifest."""
    attrs = _attributes(manifest)
    fields = DescriptorFields(
        bundle_location=bundle_location,
        coordinates=resolve_coordinates(attrs, prefix),
        dependency_coordinates=resolve_dependency_coordinates(attrs, prefix),
        build_branch=attrs.get(ManifestEntry.BUILD_BRANCH.key()),
        build_tag=attrs.get(ManifestEntry.BUILD_TAG.key()),
        build_revision=attrs.get(ManifestEntry.BUILD_REVISION.key()),
        build_timestamp=attrs.get(ManifestEntry.BUILD_TIMESTAMP.key()),
        build_jdk=attrs.get(ManifestEntry.BUILD_JDK.key()),
        built_by=attrs.get(ManifestEntry.BUILT_BY.key()),
    )
    return build_descriptor(fields)
