"""Size conversions, endpoint parsing and volume capability helpers."""

from __future__ import annotations

import os
import posixpath
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable
from urllib.parse import urlsplit

GIB = 1024 * 1024 * 1024


class EndpointError(ValueError):
    """Raised when a driver endpoint cannot be used."""


class AccessMode(IntEnum):
    """Access modes a volume capability can request."""

    UNKNOWN = 0
    SINGLE_NODE_WRITER = 1
    SINGLE_NODE_READER_ONLY = 2
    MULTI_NODE_READER_ONLY = 3
    MULTI_NODE_SINGLE_WRITER = 4
    MULTI_NODE_MULTI_WRITER = 5
    SINGLE_NODE_SINGLE_WRITER = 6
    SINGLE_NODE_MULTI_WRITER = 7


@dataclass(frozen=True)
class VolumeCapability:
    """A requested capability of a volume; only the access mode matters here."""

    access_mode: AccessMode | None = None

    @property
    def mode(self) -> AccessMode:
        """The access mode, treating a missing one as UNKNOWN."""
        return self.access_mode if self.access_mode is not None else AccessMode.UNKNOWN


def _div_trunc(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _round_up_size(volume_size_bytes: int, allocation_unit_bytes: int) -> int:
    return _div_trunc(volume_size_bytes + allocation_unit_bytes - 1, allocation_unit_bytes)


def round_up_bytes(volume_size_bytes: int) -> int:
    """Round a size in bytes up to a whole number of GiB, in bytes."""
    return _round_up_size(volume_size_bytes, GIB) * GIB


def round_up_gib(volume_size_bytes: int) -> int:
    """Round a size in bytes up to a whole number of GiB, in GiB."""
    return _round_up_size(volume_size_bytes, GIB)


def bytes_to_gib(volume_size_bytes: int) -> int:
    """Convert bytes to whole GiB, discarding any remainder."""
    return _div_trunc(volume_size_bytes, GIB)


def gib_to_bytes(volume_size_gib: int) -> int:
    """Convert GiB to bytes."""
    return volume_size_gib * GIB


def _join(*parts: str) -> str:
    """Join slash-separated parts, skipping empty ones, and clean the result."""
    nonempty = [part for part in parts if part]
    if not nonempty:
        return ""
    cleaned = posixpath.normpath("/".join(nonempty))
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def parse_endpoint(endpoint: str) -> tuple[str, str]:
    """Split an endpoint URL into its scheme and address.

    For unix endpoints any stale socket file at the address is removed.
    """
    try:
        parts = urlsplit(endpoint)
    except ValueError as err:
        raise EndpointError(f"could not parse endpoint: {err}") from err

    addr = _join(parts.netloc, parts.path)
    scheme = parts.scheme.lower()

    if scheme == "tcp":
        pass
    elif scheme == "unix":
        addr = _join("/", addr)
        try:
            os.remove(addr)
        except FileNotFoundError:
            pass
        except OSError as err:
            raise EndpointError(
                f'could not remove unix domain socket "{addr}": {err}'
            ) from err
    else:
        raise EndpointError(f"unsupported protocol: {scheme}")

    return scheme, addr


def get_access_modes(caps: Iterable[VolumeCapability]) -> list[str]:
    """Return the names of the access modes of the given capabilities."""
    return [cap.mode.name for cap in caps]