"""Type aliases and pydantic field types needed in the package."""

from typing import Annotated, Any, TypeAlias

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from .debian_version import DebianVersion, VersionLike

__all__ = ["DebianVersionField", "VersionLike"]


def _validate_version(value: Any) -> DebianVersion:
    if isinstance(value, DebianVersion):
        return value
    if isinstance(value, str):
        return DebianVersion.parse(value)
    raise ValueError(f"Expected a version string, got {type(value).__name__}")


DebianVersionField: TypeAlias = Annotated[
    DebianVersion,
    PlainValidator(_validate_version),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "format": "debian-version"}),
]
"""Pydantic field accepting a version string or DebianVersion.

Example:
    >>> class Package(BaseModel):
    ...     name: str
    ...     version: DebianVersionField
    >>> Package(name="bash", version="5.2.15-2").version.revision
    '2'
"""
