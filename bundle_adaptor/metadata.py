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
"""Extract bundle metadata from a project."""

from __future__ import annotations

import os
import pathlib
from typing import TYPE_CHECKING, Any, Final

from craft_cli import emit

from bundle_adaptor import models, util
from bundle_adaptor.classes import (
    CLASS_FILE_SUFFIX,
    CLASSES_DIRECTORY,
    list_compiled_classes,
)
from bundle_adaptor.locator import DESCRIPTOR_FILE_NAME
from bundle_adaptor.resources import resource_paths

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Mapping

BUILD_PROPERTIES_FILE_NAME: Final = "build.properties"
COMPONENT_SUFFIX: Final = ".wo"

PRINCIPAL_CLASS_PROPERTY: Final = "principalClass"
EO_ADAPTOR_CLASS_NAME_PROPERTY: Final = "eoAdaptorClassName"


def read_build_properties(
    bundle_root: pathlib.Path,
    *,
    file_name: str = BUILD_PROPERTIES_FILE_NAME,
) -> dict[str, str] | None:
    """Read the build properties of a bundle.

    :returns: The properties, or None if there is no readable properties file.
    """
    path = bundle_root / file_name
    if not path.is_file() or not os.access(path, os.R_OK):
        return None
    emit.trace(f"Reading build properties from {str(path)!r}")
    return util.read_properties_file(path)


def _class_name_fields(properties: Mapping[str, str]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    if PRINCIPAL_CLASS_PROPERTY in properties:
        fields["principal_class"] = properties[PRINCIPAL_CLASS_PROPERTY]
    # An empty adaptor class name means "no adaptor".
    if properties.get(EO_ADAPTOR_CLASS_NAME_PROPERTY):
        fields["eo_adaptor_class_name"] = properties[EO_ADAPTOR_CLASS_NAME_PROPERTY]
    return fields


def has_components(
    bundle_root: pathlib.Path, *, component_suffix: str = COMPONENT_SUFFIX
) -> bool:
    """Determine whether a bundle contains any component directories.

    The walk stops at the first match.
    """
    if bundle_root.name.endswith(component_suffix):
        return True
    for _, dirnames, _ in util.walk(bundle_root):
        if any(name.endswith(component_suffix) for name in dirnames):
            return True
    return False


def extract_metadata(  # noqa: PLR0913
    bundle_root: str | os.PathLike[str],
    *,
    descriptor_file_name: str = DESCRIPTOR_FILE_NAME,
    build_properties_file_name: str = BUILD_PROPERTIES_FILE_NAME,
    component_suffix: str = COMPONENT_SUFFIX,
    classes_directory: str = CLASSES_DIRECTORY,
    class_file_suffix: str = CLASS_FILE_SUFFIX,
    include_contents: bool = False,
) -> models.BundleMetadata:
    """Extract the metadata of the bundle rooted at ``bundle_root``.

    The principal class and database adaptor class come from the build
    properties file when the bundle has one, otherwise from the descriptor's
    ``<properties>``. The version is inherited from the parent descriptor
    when the project doesn't declare its own.

    :param bundle_root: The root directory of the bundle.
    :param include_contents: Also list the compiled classes and resource paths.
    :returns: Newly built metadata for the bundle.
    :raises DescriptorMissingError: if the bundle root has no descriptor.
    :raises DescriptorInvalidError: if the descriptor cannot be parsed.
    :raises MissingVersionError: if no version can be determined.
    :raises BundleIOError: if reading the bundle fails.
    """
    root = pathlib.Path(bundle_root).absolute()
    build_properties = read_build_properties(
        root, file_name=build_properties_file_name
    )
    descriptor = util.load_descriptor(root / descriptor_file_name)
    if build_properties is None:
        class_name_fields = _class_name_fields(descriptor.properties)
    else:
        class_name_fields = _class_name_fields(build_properties)

    contents: dict[str, Any] = {}
    if include_contents:
        contents["class_names"] = list(
            list_compiled_classes(
                root,
                classes_directory=classes_directory,
                class_file_suffix=class_file_suffix,
            )
        )
        contents["resource_paths"] = resource_paths(
            root, descriptor_file_name=descriptor_file_name
        )

    metadata = models.BundleMetadata(
        package_type=descriptor.bundle_packaging,
        executable=descriptor.artifact_id,
        short_version=descriptor.resolved_version,
        signature=models.BUNDLE_SIGNATURE,
        has_components=has_components(root, component_suffix=component_suffix),
        manifest_implementation_version=models.MANIFEST_IMPLEMENTATION_VERSION,
        **class_name_fields,
        **contents,
    )
    kind = "application" if metadata.is_application else "framework"
    emit.debug(
        f"Loaded {kind} bundle "
        f"{metadata.executable!r} version {metadata.short_version!r}"
    )
    return metadata
