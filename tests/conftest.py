"""Test fixtures for building bundles on disk.

Bundles are written under pytest's ``tmp_path`` either as exploded
directories (``<bundle>/META-INF/MANIFEST.MF``) or as ZIP archives with the
same layout. Manifest text follows the MANIFEST.MF grammar: one
``Key: Value`` header per line, main section first.
"""

import zipfile
from pathlib import Path
from typing import Mapping, Optional

import pytest

from bundlemeta import BundleProperties

PREFIX = "bundle-identity."

IDENTITY_ATTRIBUTES = {
    f"{PREFIX}Group": "com.example",
    f"{PREFIX}Id": "sample-bundle",
    f"{PREFIX}Version": "1.2.0",
    f"{PREFIX}Dependency-Group": "com.example.libs",
    f"{PREFIX}Dependency-Id": "libs-bundle",
    f"{PREFIX}Dependency-Version": "1.2.1",
}

BUILD_ATTRIBUTES = {
    "Build-Branch": "FOO",
    "Build-Jdk": "1.8.0_74",
    "Build-Revision": "a032175",
    "Build-Tag": "HEAD",
    "Build-Timestamp": "2017-01-23T10:36:27Z",
    "Built-By": "alice",
}


def manifest_text(attributes: Mapping[str, str], newline: str = "\n") -> str:
    """Render a main section, preceded by Manifest-Version like a real build tool does."""
    lines = ["Manifest-Version: 1.0"]
    lines.extend(f"{key}: {value}" for key, value in attributes.items())
    return newline.join(lines) + newline


def write_bundle_dir(root: Path, attributes: Optional[Mapping[str, str]] = None, *, raw: Optional[bytes] = None) -> Path:
    """Create an exploded bundle directory at ``root`` and return it."""
    meta_inf = root / "META-INF"
    meta_inf.mkdir(parents=True)
    data = raw if raw is not None else manifest_text(attributes or {}).encode("utf-8")
    (meta_inf / "MANIFEST.MF").write_bytes(data)
    return root


def write_bundle_zip(path: Path, attributes: Optional[Mapping[str, str]] = None, *, raw: Optional[bytes] = None) -> Path:
    """Create a bundle archive at ``path`` and return it."""
    data = raw if raw is not None else manifest_text(attributes or {}).encode("utf-8")
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("META-INF/MANIFEST.MF", data)
        zf.writestr("lib/placeholder.txt", "not a manifest")
    return path


@pytest.fixture
def properties() -> BundleProperties:
    """Properties using the bundle-identity. prefix."""
    return BundleProperties(meta_id_prefix=PREFIX)


@pytest.fixture
def full_attributes() -> dict[str, str]:
    """Identity, dependency and all six build attributes."""
    return {**IDENTITY_ATTRIBUTES, **BUILD_ATTRIBUTES}


@pytest.fixture
def bundle_with_versioning(tmp_path, full_attributes) -> Path:
    return write_bundle_dir(tmp_path / "bundle-with-versioning", full_attributes)


@pytest.fixture
def bundle_without_dependency(tmp_path, full_attributes) -> Path:
    attributes = {k: v for k, v in full_attributes.items() if "Dependency" not in k}
    return write_bundle_dir(tmp_path / "bundle-without-dependency", attributes)


@pytest.fixture
def bundle_without_versioning(tmp_path) -> Path:
    """Only ids, Build-Jdk and Built-By; group, version and most build info are missing."""
    attributes = {
        f"{PREFIX}Id": "sample-bundle",
        f"{PREFIX}Dependency-Id": "libs-bundle",
        "Build-Jdk": "1.8.0_74",
        "Built-By": "alice",
    }
    return write_bundle_dir(tmp_path / "bundle-without-versioning", attributes)


@pytest.fixture
def bundle_archive(tmp_path, full_attributes) -> Path:
    return write_bundle_zip(tmp_path / "sample-bundle.bundle", full_attributes)
