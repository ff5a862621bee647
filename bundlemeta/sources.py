"""Access to resources inside a bundle.

A bundle is either an exploded directory or a ZIP archive. Both are exposed
through :class:`BundleSource`, whose ``open_resource`` yields a binary
stream for a path relative to the bundle root and closes it (and, for
archives, the mounted archive) when the ``with`` block exits.
"""

from __future__ import annotations

import os
import zipfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, ContextManager, Iterator

from bundlemeta.errors import InvalidBundleReferenceError, ResourceAccessError

if TYPE_CHECKING:
    from bundlemeta.config import BundleProperties

MANIFEST_PATH = "META-INF/MANIFEST.MF"

# Always mounted as archives, whatever the configured bundle extension.
ZIP_EXTENSIONS = ("zip", "jar")


def _as_path(location: Any) -> Path:
    if location is None:
        raise InvalidBundleReferenceError("Bundle location cannot be None")
    try:
        return Path(os.fspath(location))
    except TypeError as e:
        raise InvalidBundleReferenceError(f"Bundle location must be path-like, got {type(location).__name__}") from e


def ensure_directory_exists_and_can_read(directory: Path) -> None:
    """Check that ``directory`` exists, is a directory and is readable.

    Raises:
        ResourceAccessError: If any of the checks fails.
    """
    if directory.exists() and not directory.is_dir():
        raise ResourceAccessError(f"{directory} is not a directory", location=str(directory))
    if not directory.exists():
        raise ResourceAccessError(f"{directory} does not exist", location=str(directory))
    if not os.access(directory, os.R_OK | os.X_OK):
        raise ResourceAccessError(f"{directory} directory does not have read privilege", location=str(directory))


class BundleSource(ABC):
    """Resolves resource paths against one bundle.

    ``location`` is kept exactly as given by the caller.
    """

    def __init__(self, location: Any):
        self.path = _as_path(location)
        self.location = location

    @abstractmethod
    def describe(self, relative_path: str) -> str:
        """Return a human-readable location for ``relative_path`` in this bundle."""

    @abstractmethod
    def open_resource(self, relative_path: str) -> ContextManager[IO[bytes]]:
        """Open ``relative_path`` for binary reading.

        Use as a context manager; the stream is closed on exit.

        Raises:
            ResourceAccessError: If the resource is missing or unreadable.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


class DirectoryBundleSource(BundleSource):
    """Bundle exploded into a directory tree."""

    def describe(self, relative_path: str) -> str:
        return str(self.path / relative_path)

    @contextmanager
    def open_resource(self, relative_path: str) -> Iterator[IO[bytes]]:
        ensure_directory_exists_and_can_read(self.path)
        resource = self.path / relative_path
        try:
            stream = resource.open("rb")
        except OSError as e:
            raise ResourceAccessError(f"failed opening {resource}: {e.strerror or e}", location=str(resource)) from e
        with stream:
            yield stream


class ArchiveBundleSource(BundleSource):
    """Bundle packed as a single ZIP archive."""

    def describe(self, relative_path: str) -> str:
        return f"zip:{self.path}!/{relative_path}"

    @contextmanager
    def mount(self) -> Iterator[zipfile.ZipFile]:
        """Open the archive's file tree for the duration of the ``with`` block."""
        try:
            archive = zipfile.ZipFile(self.path)
        except (OSError, zipfile.BadZipFile) as e:
            raise ResourceAccessError(f"failed mounting archive {self.path}: {e}", location=str(self.path)) from e
        with archive:
            yield archive

    @contextmanager
    def open_resource(self, relative_path: str) -> Iterator[IO[bytes]]:
        with self.mount() as archive:
            try:
                stream = archive.open(relative_path)
            except KeyError as e:
                location = self.describe(relative_path)
                raise ResourceAccessError(f"{location} does not exist", location=location) from e
            except (zipfile.BadZipFile, RuntimeError, NotImplementedError) as e:
                # Corrupt local header, encrypted member or unsupported compression.
                location = self.describe(relative_path)
                raise ResourceAccessError(f"failed opening {location}: {e}", location=location) from e
            with stream:
                yield stream


def is_bundle_archive(path: Path, archive_extension: str) -> bool:
    """Return True if ``path`` is a file that should be read as an archive."""
    if not path.is_file():
        return False
    suffix = path.suffix.lstrip(".").lower()
    if suffix in ZIP_EXTENSIONS or suffix == archive_extension.lower():
        return True
    return zipfile.is_zipfile(path)


def open_bundle_source(location: Any, properties: BundleProperties) -> BundleSource:
    """Pick the source implementation matching what ``location`` points at.

    Raises:
        InvalidBundleReferenceError: If ``location`` is None or not path-like.
        ResourceAccessError: If nothing readable exists at ``location``.
    """
    path = _as_path(location)
    if path.is_dir():
        return DirectoryBundleSource(location)
    if is_bundle_archive(path, properties.archive_extension):
        return ArchiveBundleSource(location)
    if path.exists():
        raise ResourceAccessError(f"{path} is neither a directory nor a bundle archive", location=str(path))
    raise ResourceAccessError(f"{path} does not exist", location=str(path))
