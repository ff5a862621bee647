"""Bundle coordinates: the (group, id, version) triple naming a bundle."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_GROUP = "default"
DEFAULT_VERSION = "unversioned"


class BundleCoordinates(BaseModel):
    """Identity of a bundle or of the bundle it depends on.

    ``group`` and ``version`` fall back to :data:`DEFAULT_GROUP` and
    :data:`DEFAULT_VERSION` when they are absent (``None``). An explicit
    empty string is kept as given. ``id`` has no default; a missing id is
    left for the caller to reject.

    Instances are frozen and compare and hash by value.
    """

    model_config = {"frozen": True}

    group: str = Field(default=DEFAULT_GROUP, description="Bundle group, e.g. 'com.example'")
    id: Optional[str] = Field(default=None, description="Bundle id, e.g. 'sample-bundle'")
    version: str = Field(default=DEFAULT_VERSION, description="Bundle version string (not validated)")

    @field_validator("group", mode="before")
    @classmethod
    def _default_group(cls, value: Any) -> Any:
        return DEFAULT_GROUP if value is None else value

    @field_validator("version", mode="before")
    @classmethod
    def _default_version(cls, value: Any) -> Any:
        return DEFAULT_VERSION if value is None else value

    @property
    def coordinate(self) -> str:
        """The triple joined as ``group:id:version``."""
        return f"{self.group}:{self.id or ''}:{self.version}"

    def __str__(self) -> str:
        return self.coordinate
