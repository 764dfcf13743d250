import re
from typing import NamedTuple

__all__ = ["version", "version_info"]

version = "0.1.0"

_levels = {"a": "alpha", "b": "beta", "c": "candidate", "rc": "candidate"}


class VersionInfo(NamedTuple):
    """The parts of a version number, like ``sys.version_info``"""

    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        match = re.match(r"(\d+)\.(\d+)\.(\d+)(?:(a|b|r?c)(\d+))?$", v)
        if not match:
            raise ValueError(f"Invalid version: {v!r}.")
        major, minor, micro, level, serial = match.groups()
        return cls(
            int(major),
            int(minor),
            int(micro),
            _levels[level] if level else "final",
            int(serial or 0),
        )

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.micro}"
        if self.releaselevel == "final":
            return base
        return f"{base}{self.releaselevel[:1]}{self.serial}"


version_info = VersionInfo.from_str(version)
