"""Sizing, endpoint, access-mode, locking and version helpers for a block storage CSI driver."""

__version__ = "0.1.0"
__all__ = ["util", "volume_lock", "version"]