# This file is part of bundle-adaptor.
#
# Copyright 2026 Canonical Ltd.
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License version 3, as
# published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranties of MERCHANTABILITY,
# SATISFACTORY QUALITY, or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with this program.  If not, see <http://www.gnu.org/licenses/>.
"""Find the root of the bundle that encloses a path."""

from __future__ import annotations

import os
import pathlib
from typing import Final

from craft_cli import emit

from bundle_adaptor import errors, util

DESCRIPTOR_FILE_NAME: Final = "pom.xml"


def locate(
    start_path: str | os.PathLike[str],
    *,
    descriptor_file_name: str = DESCRIPTOR_FILE_NAME,
) -> pathlib.Path | None:
    """Find the bundle root enclosing ``start_path``.

    Starting at ``start_path`` and moving up one directory at a time, the
    first directory containing a project descriptor decides the result: it is
    the bundle root if the descriptor parses and declares a bundle packaging,
    otherwise there is no bundle root. The walk never continues past a
    descriptor.

    :param start_path: The directory to start searching from.
    :param descriptor_file_name: The name of the project descriptor file.
    :returns: The absolute bundle root, or None if there isn't one.
    """
    current = pathlib.Path(start_path).resolve()
    while current.is_dir():
        descriptor_path = current / descriptor_file_name
        if descriptor_path.exists():
            try:
                descriptor = util.load_descriptor(descriptor_path)
            except errors.BundleAdaptorError as err:
                emit.debug(
                    f"Ignoring unreadable descriptor {str(descriptor_path)!r}: {err}"
                )
                return None
            if not descriptor.is_bundle:
                emit.debug(
                    f"Project {descriptor.artifact_id!r} has packaging "
                    f"{descriptor.packaging!r}, not a bundle."
                )
                return None
            emit.debug(f"Found {descriptor.packaging} bundle root at {str(current)!r}")
            return current
        if current.parent == current:
            break
        current = current.parent
    return None


def is_adaptable(
    path: str | os.PathLike[str],
    *,
    descriptor_file_name: str = DESCRIPTOR_FILE_NAME,
) -> bool:
    """Determine whether ``path`` is inside a bundle root."""
    return locate(path, descriptor_file_name=descriptor_file_name) is not None


def adaptor_bundle_path(
    path: str | os.PathLike[str],
    *,
    descriptor_file_name: str = DESCRIPTOR_FILE_NAME,
) -> pathlib.Path:
    """Get the bundle root enclosing ``path``.

    :raises NotAdaptableError: if ``path`` is not inside a bundle root. Callers
        are expected to check :func:`is_adaptable` first.
    """
    root = locate(path, descriptor_file_name=descriptor_file_name)
    if root is None:
        raise errors.NotAdaptableError(path)
    return root
