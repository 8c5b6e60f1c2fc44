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
"""Abstract base class for bundle adaptor providers."""

from __future__ import annotations

import abc
import pathlib
from typing import TYPE_CHECKING

from bundle_adaptor.config import ConfigService

if TYPE_CHECKING:  # pragma: no cover
    import os
    from collections.abc import Iterator, Mapping

    from bundle_adaptor import models


class BundleAdaptorProvider(metaclass=abc.ABCMeta):
    """Adapts a kind of project on disk into a bundle for the bundle loader.

    The loader asks each registered provider whether it can adapt a path with
    :meth:`is_adaptable`. Only after a provider says yes does the loader use
    the remaining methods, passing the bundle path the provider returned.

    :param config: The configuration to read file names and suffixes from.
    """

    def __init__(self, config: ConfigService | None = None) -> None:
        self._config = config or ConfigService()

    @abc.abstractmethod
    def is_adaptable(self, bundle_path: str | os.PathLike[str]) -> bool:
        """Whether this provider can adapt the bundle containing ``bundle_path``."""

    @abc.abstractmethod
    def adaptor_bundle_path(self, bundle_path: str | os.PathLike[str]) -> str:
        """Get the path of the bundle containing ``bundle_path``.

        Only valid when :meth:`is_adaptable` is true for ``bundle_path``.
        """

    def bundle_path(self, adaptor_bundle_path: str) -> pathlib.Path:
        """Convert a path from :meth:`adaptor_bundle_path` to a filesystem path."""
        return pathlib.Path(adaptor_bundle_path)

    @abc.abstractmethod
    def bundle_info(self, bundle_path: pathlib.Path) -> models.BundleMetadata:
        """Get the metadata of the bundle at ``bundle_path``."""

    @abc.abstractmethod
    def class_names(self, bundle_path: pathlib.Path) -> Iterator[str]:
        """Get the names of the classes in the bundle at ``bundle_path``."""

    @abc.abstractmethod
    def resource_paths(self, bundle_path: pathlib.Path) -> list[pathlib.Path]:
        """Get the resource directories of the bundle at ``bundle_path``."""

    @abc.abstractmethod
    def properties(self, bundle_path: pathlib.Path) -> Mapping[str, str]:
        """Get the runtime properties of the bundle at ``bundle_path``."""
