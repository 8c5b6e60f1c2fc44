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
"""Bundle adaptor for Maven projects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from craft_cli import emit
from typing_extensions import override

from bundle_adaptor import locator, metadata, resources, util
from bundle_adaptor.adaptors import base
from bundle_adaptor.classes import list_compiled_classes

if TYPE_CHECKING:  # pragma: no cover
    import os
    import pathlib
    from collections.abc import Iterator

    from bundle_adaptor import models


class MavenBundleAdaptor(base.BundleAdaptorProvider):
    """Adapts Maven projects packaged as applications or frameworks into bundles."""

    @property
    def _descriptor_file_name(self) -> str:
        return self._config.get("descriptor_file_name")

    @override
    def is_adaptable(self, bundle_path: str | os.PathLike[str]) -> bool:
        return locator.is_adaptable(
            bundle_path, descriptor_file_name=self._descriptor_file_name
        )

    @override
    def adaptor_bundle_path(self, bundle_path: str | os.PathLike[str]) -> str:
        return str(
            locator.adaptor_bundle_path(
                bundle_path, descriptor_file_name=self._descriptor_file_name
            )
        )

    @override
    def bundle_info(self, bundle_path: pathlib.Path) -> models.BundleMetadata:
        return metadata.extract_metadata(
            bundle_path,
            descriptor_file_name=self._descriptor_file_name,
            build_properties_file_name=self._config.get("build_properties_file_name"),
            component_suffix=self._config.get("component_suffix"),
        )

    @override
    def class_names(self, bundle_path: pathlib.Path) -> Iterator[str]:
        return list_compiled_classes(
            bundle_path,
            classes_directory=self._config.get("classes_directory"),
            class_file_suffix=self._config.get("class_file_suffix"),
        )

    @override
    def resource_paths(self, bundle_path: pathlib.Path) -> list[pathlib.Path]:
        return resources.resource_paths(
            bundle_path, descriptor_file_name=self._descriptor_file_name
        )

    @override
    def properties(self, bundle_path: pathlib.Path) -> dict[str, str]:
        """Get the runtime properties of the bundle at ``bundle_path``.

        These come from the properties file in each resource directory. When
        several resource directories define the same property, the first one
        wins, so a project's own resources override those of its parents.
        """
        file_name = self._config.get("bundle_properties_file_name")
        merged: dict[str, str] = {}
        for resource_dir in reversed(self.resource_paths(bundle_path)):
            properties_path = resource_dir / file_name
            if not properties_path.is_file():
                continue
            emit.trace(f"Reading bundle properties from {str(properties_path)!r}")
            merged.update(util.read_properties_file(properties_path))
        return merged
