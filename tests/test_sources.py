"""Tests for directory and archive bundle sources."""

import zipfile

import pytest

from bundlemeta.config import BundleProperties
from bundlemeta.errors import InvalidBundleReferenceError, ResourceAccessError
from bundlemeta.sources import (
    MANIFEST_PATH,
    ArchiveBundleSource,
    DirectoryBundleSource,
    ensure_directory_exists_and_can_read,
    is_bundle_archive,
    open_bundle_source,
)

from tests.conftest import write_bundle_dir, write_bundle_zip


class TestEnsureDirectory:
    """Test ensure_directory_exists_and_can_read()."""

    def test_existing_directory(self, tmp_path):
        ensure_directory_exists_and_can_read(tmp_path)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ResourceAccessError, match="does not exist"):
            ensure_directory_exists_and_can_read(tmp_path / "missing")

    def test_file_is_not_a_directory(self, tmp_path):
        path = tmp_path / "file.txt"
        path.write_text("x")
        with pytest.raises(ResourceAccessError, match="is not a directory") as exc_info:
            ensure_directory_exists_and_can_read(path)
        assert exc_info.value.location == str(path)


class TestDirectoryBundleSource:
    """Test DirectoryBundleSource."""

    def test_open_resource(self, tmp_path):
        bundle = write_bundle_dir(tmp_path / "bundle", {"Built-By": "alice"})
        source = DirectoryBundleSource(bundle)
        with source.open_resource(MANIFEST_PATH) as stream:
            data = stream.read()
        assert b"Built-By: alice" in data
        assert stream.closed

    def test_describe(self, tmp_path):
        source = DirectoryBundleSource(tmp_path)
        assert source.describe(MANIFEST_PATH) == str(tmp_path / "META-INF" / "MANIFEST.MF")

    def test_keeps_caller_location(self, tmp_path):
        location = str(tmp_path)
        source = DirectoryBundleSource(location)
        assert source.location is location
        assert source.path == tmp_path

    def test_rejects_none(self):
        with pytest.raises(InvalidBundleReferenceError):
            DirectoryBundleSource(None)

    def test_rejects_non_path_like(self):
        with pytest.raises(InvalidBundleReferenceError, match="path-like"):
            DirectoryBundleSource(42)


class TestArchiveBundleSource:
    """Test ArchiveBundleSource."""

    def test_open_resource(self, tmp_path):
        archive = write_bundle_zip(tmp_path / "b.bundle", {"Built-By": "alice"})
        source = ArchiveBundleSource(archive)
        with source.open_resource(MANIFEST_PATH) as stream:
            data = stream.read()
        assert b"Built-By: alice" in data
        assert stream.closed

    def test_mount_exposes_archive_tree(self, tmp_path):
        archive = write_bundle_zip(tmp_path / "b.bundle", {})
        source = ArchiveBundleSource(archive)
        with source.mount() as mounted:
            names = mounted.namelist()
        assert MANIFEST_PATH in names
        assert "lib/placeholder.txt" in names

    def test_mount_is_not_cached(self, tmp_path):
        archive = write_bundle_zip(tmp_path / "b.bundle", {})
        source = ArchiveBundleSource(archive)
        with source.mount() as first:
            pass
        with source.mount() as second:
            assert second is not first

    def test_describe(self, tmp_path):
        source = ArchiveBundleSource(tmp_path / "b.bundle")
        assert source.describe(MANIFEST_PATH) == f"zip:{tmp_path / 'b.bundle'}!/META-INF/MANIFEST.MF"

    def test_missing_member(self, tmp_path):
        archive = tmp_path / "empty.zip"
        with zipfile.ZipFile(archive, "w"):
            pass
        source = ArchiveBundleSource(archive)
        with pytest.raises(ResourceAccessError, match="does not exist"):
            with source.open_resource(MANIFEST_PATH):
                pass


class TestOpenBundleSource:
    """Test open_bundle_source() dispatch."""

    def test_directory(self, tmp_path):
        source = open_bundle_source(tmp_path, BundleProperties())
        assert isinstance(source, DirectoryBundleSource)
        assert source.location is tmp_path

    def test_configured_extension(self, tmp_path):
        archive = tmp_path / "x.nar"
        archive.write_bytes(b"not checked for this suffix")
        source = open_bundle_source(archive, BundleProperties(archive_extension="nar"))
        assert isinstance(source, ArchiveBundleSource)

    def test_zip_content_with_unknown_suffix(self, tmp_path):
        archive = write_bundle_zip(tmp_path / "x.pkg", {})
        assert isinstance(open_bundle_source(archive, BundleProperties()), ArchiveBundleSource)

    def test_plain_file(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(ResourceAccessError, match="neither a directory nor a bundle archive"):
            open_bundle_source(path, BundleProperties())

    def test_missing(self, tmp_path):
        with pytest.raises(ResourceAccessError, match="does not exist"):
            open_bundle_source(tmp_path / "missing", BundleProperties())

    def test_is_bundle_archive_requires_a_file(self, tmp_path):
        assert not is_bundle_archive(tmp_path, "bundle")
        assert not is_bundle_archive(tmp_path / "missing.zip", "bundle")
