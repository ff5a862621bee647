"""Manifest attribute names understood by bundlemeta.

Identity entries are namespaced: their manifest key is the configured
prefix followed by the suffix below. Build entries are read as-is.
"""

from enum import Enum


class ManifestEntry(Enum):
    """Known manifest attributes and whether they take the identity prefix."""

    PRE_GROUP = ("Group", True)
    PRE_ID = ("Id", True)
    PRE_VERSION = ("Version", True)
    PRE_DEPENDENCY_GROUP = ("Dependency-Group", True)
    PRE_DEPENDENCY_ID = ("Dependency-Id", True)
    PRE_DEPENDENCY_VERSION = ("Dependency-Version", True)

    BUILD_BRANCH = ("Build-Branch", False)
    BUILD_TAG = ("Build-Tag", False)
    BUILD_REVISION = ("Build-Revision", False)
    BUILD_TIMESTAMP = ("Build-Timestamp", False)
    BUILD_JDK = ("Build-Jdk", False)
    BUILT_BY = ("Built-By", False)

    def __init__(self, manifest_name: str, prefixed: bool):
        self.manifest_name = manifest_name
        self.prefixed = prefixed

    def key(self, prefix: str = "") -> str:
        """Return the manifest key for this entry under ``prefix``.

        The prefix is ignored for un-prefixed (build) entries.
        """
        if self.prefixed:
            return f"{prefix}{self.manifest_name}"
        return self.manifest_name


IDENTITY_ENTRIES = tuple(e for e in ManifestEntry if e.prefixed)
BUILD_ENTRIES = tuple(e for e in ManifestEntry if not e.prefixed)
