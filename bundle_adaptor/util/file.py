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
"""Helper utilities for walking bundle directories."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from bundle_adaptor import errors

if TYPE_CHECKING:  # pragma: no cover
    import pathlib
    from collections.abc import Iterator


def _raise_walk_error(err: OSError) -> None:
    raise errors.BundleIOError.from_os_error(err) from err


def walk(top: pathlib.Path) -> Iterator[tuple[str, list[str], list[str]]]:
    """Walk a directory tree top-down without following symbolic links.

    This works like :func:`os.walk`, except that errors reading a directory
    are raised as :class:`BundleIOError` rather than ignored.
    """
    return os.walk(top, onerror=_raise_walk_error)
