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
"""Configuration model for bundle-adaptor."""

from __future__ import annotations

import pydantic

from bundle_adaptor import classes, locator, metadata


class ConfigModel(pydantic.BaseModel):
    """Configurable names and locations used when adapting a bundle."""

    descriptor_file_name: str = locator.DESCRIPTOR_FILE_NAME
    build_properties_file_name: str = metadata.BUILD_PROPERTIES_FILE_NAME
    bundle_properties_file_name: str = "Properties"
    classes_directory: str = classes.CLASSES_DIRECTORY
    class_file_suffix: str = classes.CLASS_FILE_SUFFIX
    component_suffix: str = metadata.COMPONENT_SUFFIX
