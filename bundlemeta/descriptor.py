"""The bundle descriptor and its staged construction.

Descriptors are assembled by filling a :class:`DescriptorFields` accumulator
and handing it to :func:`build_descriptor`, which checks that the required
fields were supplied and returns a frozen :class:`BundleDescriptor`.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from bundlemeta.coordinates import BundleCoordinates
from bundlemeta.errors import IncompleteDescriptorError


class BundleDescriptor(BaseModel):
    """Identity, dependency and build provenance of one bundle.

    ``bundle_location`` is whatever the caller passed in (a directory path,
    an archive path, ...). It is stored as-is and never copied.
    Build provenance fields are ``None`` when the manifest does not carry
    the corresponding attribute.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    bundle_location: Any = Field(..., description="Where the bundle was read from")
    coordinates: BundleCoordinates = Field(..., description="Coordinates of the bundle itself")
    dependency_coordinates: Optional[BundleCoordinates] = Field(
        None,
        description="Coordinates of the declared dependency, if any",
    )
    build_branch: Optional[str] = Field(None, description="Build-Branch attribute")
    build_tag: Optional[str] = Field(None, description="Build-Tag attribute")
    build_revision: Optional[str] = Field(None, description="Build-Revision attribute")
    build_timestamp: Optional[str] = Field(None, description="Build-Timestamp attribute")
    build_jdk: Optional[str] = Field(None, description="Build-Jdk attribute")
    built_by: Optional[str] = Field(None, description="Built-By attribute")


class DescriptorFields(BaseModel):
    """Mutable accumulator for descriptor fields. Consumed by :func:`build_descriptor`."""

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    bundle_location: Any = None
    coordinates: Optional[BundleCoordinates] = None
    dependency_coordinates: Optional[BundleCoordinates] = None
    build_branch: Optional[str] = None
    build_tag: Optional[str] = None
    build_revision: Optional[str] = None
    build_timestamp: Optional[str] = None
    build_jdk: Optional[str] = None
    built_by: Optional[str] = None


def build_descriptor(fields: DescriptorFields) -> BundleDescriptor:
    """Validate ``fields`` and freeze them into a :class:`BundleDescriptor`.

    Raises:
        IncompleteDescriptorError: If the bundle location or the coordinates
            were never set.
    """
    if fields.bundle_location is None:
        raise IncompleteDescriptorError("bundle location must be set before building a descriptor")
    if fields.coordinates is None:
        raise IncompleteDescriptorError("coordinates must be set before building a descriptor")
    return BundleDescriptor(
        bundle_location=fields.bundle_location,
        coordinates=fields.coordinates,
        dependency_coordinates=fields.dependency_coordinates,
        build_branch=fields.build_branch,
        build_tag=fields.build_tag,
        build_revision=fields.build_revision,
        build_timestamp=fields.build_timestamp,
        build_jdk=fields.build_jdk,
        built_by=fields.built_by,
    )
