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
"""Enumerate the compiled classes of a bundle."""

from __future__ import annotations

import os
import pathlib
from typing import TYPE_CHECKING, Final

from craft_cli import emit

from bundle_adaptor import errors, util

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

CLASSES_DIRECTORY: Final = "target/classes"
CLASS_FILE_SUFFIX: Final = ".class"


def _walk_class_names(output_dir: pathlib.Path, suffix: str) -> Iterator[str]:
    for dirpath, _, filenames in util.walk(output_dir):
        directory = pathlib.Path(dirpath)
        for filename in filenames:
            if not filename.endswith(suffix):
                continue
            path = directory / filename
            if not path.is_file():
                continue
            relative = path.relative_to(output_dir)
            yield ".".join((*relative.parent.parts, filename[: -len(suffix)]))


def list_compiled_classes(
    bundle_root: str | os.PathLike[str],
    *,
    classes_directory: str = CLASSES_DIRECTORY,
    class_file_suffix: str = CLASS_FILE_SUFFIX,
) -> Iterator[str]:
    """List the dotted names of the compiled classes in a bundle.

    The output directory is checked immediately; the directory tree is only
    walked as the returned iterator is consumed. Calling this again walks the
    tree again.

    :param bundle_root: The root directory of the bundle.
    :param classes_directory: The compiled output directory, relative to the root.
    :param class_file_suffix: The file suffix of compiled classes.
    :returns: An iterator of class names such as ``your.app.Application``.
    :raises OutputDirectoryMissingError: if the output directory does not exist.
    """
    output_dir = pathlib.Path(bundle_root) / classes_directory
    if not output_dir.is_dir():
        raise errors.OutputDirectoryMissingError(output_dir)
    emit.trace(f"Listing compiled classes in {str(output_dir)!r}")
    return _walk_class_names(output_dir, class_file_suffix)
