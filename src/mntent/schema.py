"""
Mount table schema.

Typed contract between the parser and its callers. One MountEntry per
non-comment, non-blank fstab line.
"""

from typing import Tuple

from pydantic import BaseModel, Field


# --- Line layout ---

FIELD_COUNT = 6
MAX_FIELD_VALUE = 2**31 - 1  # dump/pass fields are unsigned 31-bit


class MountEntry(BaseModel):
    """Single line from an fstab-format file."""

    name: str  # device or filesystem, e.g. "/dev/sda1", "UUID=...", "tmpfs"
    directory: str  # mount point
    types: Tuple[str, ...]  # "udf,iso9660" -> ("udf", "iso9660")
    options: Tuple[str, ...]
    dump_frequency: int = Field(ge=0, le=MAX_FIELD_VALUE)
    pass_number: int = Field(ge=0, le=MAX_FIELD_VALUE)

    model_config = {"frozen": True, "extra": "forbid"}
