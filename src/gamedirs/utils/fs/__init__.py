"""Filesystem provider abstraction for scanning local directories."""

from .provider import FileInfo
from .provider import FilesystemProvider
from .provider import LocalFilesystem


__all__ = [
    "FileInfo",
    "FilesystemProvider",
    "LocalFilesystem",
]
