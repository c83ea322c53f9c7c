"""File size value object used for upload limits."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class FileSizeUnit(str, Enum):
    """Units a file size can be expressed in (binary multiples)."""

    BYTE = "Byte"
    KILOBYTE = "Kilobyte"
    MEGABYTE = "Megabyte"
    GIGABYTE = "Gigabyte"

    @property
    def multiplier(self) -> int:
        """Number of bytes in one unit."""
        multipliers = {
            FileSizeUnit.BYTE: 1,
            FileSizeUnit.KILOBYTE: 1024,
            FileSizeUnit.MEGABYTE: 1024 * 1024,
            FileSizeUnit.GIGABYTE: 1024 * 1024 * 1024,
        }
        return multipliers[self]


@dataclass(frozen=True)
class FileSize:
    """Immutable size expressed as a value and a unit.

    Example:
        >>> FileSize.create(2, FileSize.Unit.MEGABYTE).bytes
        2097152
    """

    Unit: ClassVar[type[FileSizeUnit]] = FileSizeUnit

    value: int
    unit: FileSizeUnit

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"File size must not be negative, got {self.value}")

    @classmethod
    def create(cls, value: int, unit: FileSizeUnit) -> "FileSize":
        """Build a FileSize, accepting the unit as an enum member or its name."""
        return cls(value=value, unit=FileSizeUnit(unit))

    @property
    def bytes(self) -> int:
        """Size normalized to bytes."""
        return self.value * self.unit.multiplier

    def __str__(self) -> str:
        return f"{self.value} {self.unit.value}"
