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
"""Resolve the resource directories of a bundle."""

from __future__ import annotations

import os
import pathlib
from typing import TYPE_CHECKING

from craft_cli import emit

from bundle_adaptor import errors, util
from bundle_adaptor.locator import DESCRIPTOR_FILE_NAME

if TYPE_CHECKING:  # pragma: no cover
    from bundle_adaptor import models


def _parent_descriptor_path(
    descriptor_path: pathlib.Path,
    descriptor: models.ProjectDescriptor,
    descriptor_file_name: str,
) -> pathlib.Path | None:
    """Get the path of a descriptor's parent, if it has one on the filesystem."""
    if descriptor.parent is None or not descriptor.parent.relative_path:
        return None
    parent_path = descriptor_path.parent / descriptor.parent.relative_path
    if parent_path.is_dir():
        parent_path /= descriptor_file_name
    return parent_path


def declared_resource_directories(
    descriptor_path: pathlib.Path,
    *,
    descriptor_file_name: str = DESCRIPTOR_FILE_NAME,
) -> list[str]:
    """Collect the resource directories declared by a descriptor and its parents.

    Each descriptor's directories come in declaration order and are followed
    by those of its parent, then its grandparent, and so on. Nothing is
    merged or deduplicated.

    :param descriptor_path: The path to the first descriptor in the chain.
    :param descriptor_file_name: The file name used when a parent's relative
        path names a directory.
    :returns: The directories exactly as declared.
    :raises DescriptorCycleError: if the parent chain loops.
    """
    directories: list[str] = []
    visited: set[pathlib.Path] = set()
    current: pathlib.Path | None = descriptor_path
    while current is not None:
        # Path.resolve() never fails on a missing file; that is left to the loader.
        key = current.resolve()
        if key in visited:
            raise errors.DescriptorCycleError(current)
        visited.add(key)

        descriptor = util.load_descriptor(current)
        emit.trace(
            f"{descriptor.artifact_id!r} declares resources "
            f"{descriptor.resource_directories!r}"
        )
        directories.extend(descriptor.resource_directories)
        current = _parent_descriptor_path(current, descriptor, descriptor_file_name)
    return directories


def resource_paths(
    bundle_root: str | os.PathLike[str],
    *,
    descriptor_file_name: str = DESCRIPTOR_FILE_NAME,
) -> list[pathlib.Path]:
    """Get the resource directories of a bundle.

    Resource directories inherited from parent descriptors are resolved
    against ``bundle_root``, not against the parent's own directory.

    :param bundle_root: The root directory of the bundle.
    :param descriptor_file_name: The name of the project descriptor file.
    :returns: Absolute paths, child directories first.
    """
    root = pathlib.Path(bundle_root).absolute()
    directories = declared_resource_directories(
        root / descriptor_file_name, descriptor_file_name=descriptor_file_name
    )
    return [root / directory for directory in directories]
