"""Reading and writing whole files relative to the application directory."""

from __future__ import annotations

import functools
import logging
import os

_log = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def application_directory() -> str:
    """The working directory at the first call; later calls return the same value."""
    directory = os.getcwd()
    _log.info("ApplicationDirectory: %s", directory)
    return directory


def relative_path_to_full_path(relative_path: str) -> str:
    return os.path.join(application_directory(), relative_path)


def get_file_data(file_name: str) -> bytes:
    """The whole contents of a file named relative to the application directory."""
    path = relative_path_to_full_path(file_name)
    with open(path, "rb") as handle:
        data = handle.read()
    _log.debug("Read file was success %s", path)
    return data


def save_file_data(file_name: str, data: bytes) -> None:
    """Write ``data`` to a file named relative to the application directory."""
    path = relative_path_to_full_path(file_name)
    with open(path, "wb") as handle:
        written = handle.write(data)
    if written != len(data):
        raise OSError(f"writing file went wrong {path}")
    _log.debug("Write file was success %s", path)