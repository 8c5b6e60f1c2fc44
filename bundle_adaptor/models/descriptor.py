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
"""Project descriptor models.

These models hold the subset of a Maven project object model that matters
when loading a project as a bundle: its identity, its packaging, its parent
and the resource directories it declares.
"""

from __future__ import annotations

from typing import Final

import pydantic

from bundle_adaptor import errors
from bundle_adaptor.models import base
from bundle_adaptor.models.bundle import BundlePackaging

APPLICATION_PACKAGING: Final = "woapplication"
FRAMEWORK_PACKAGING: Final = "woframework"
BUNDLE_PACKAGING: Final = frozenset({APPLICATION_PACKAGING, FRAMEWORK_PACKAGING})
"""Packaging values that mark a project as a bundle."""

DEFAULT_PACKAGING: Final = "jar"
DEFAULT_PARENT_RELATIVE_PATH: Final = "../pom.xml"


class Resource(base.CraftBaseModel):
    """A ``<resource>`` entry of the project build."""

    directory: str | None = None


class ParentReference(base.CraftBaseModel):
    """The ``<parent>`` of a project."""

    group_id: str | None = None
    artifact_id: str | None = None
    version: str | None = None
    relative_path: str = DEFAULT_PARENT_RELATIVE_PATH
    """Path to the parent descriptor, relative to the child's directory.

    An empty value means the parent is not looked up on the filesystem.
    """


class ProjectDescriptor(base.CraftBaseModel):
    """A parsed project descriptor."""

    model_config = pydantic.ConfigDict(frozen=True)

    packaging: str = DEFAULT_PACKAGING
    group_id: str | None = None
    artifact_id: str
    version: str | None = None
    name: str | None = None
    parent: ParentReference | None = None
    resources: list[Resource] = pydantic.Field(default_factory=list)
    properties: dict[str, str] = pydantic.Field(default_factory=dict)

    @property
    def is_bundle(self) -> bool:
        """Whether this project's packaging marks it as a bundle."""
        return self.packaging in BUNDLE_PACKAGING

    @property
    def bundle_packaging(self) -> BundlePackaging:
        """The bundle type for this project's packaging."""
        if self.packaging == APPLICATION_PACKAGING:
            return BundlePackaging.APPLICATION
        return BundlePackaging.FRAMEWORK

    @property
    def resolved_version(self) -> str:
        """The project version, inherited from the parent when not declared.

        :raises MissingVersionError: if neither this project nor its parent has one.
        """
        if self.version:
            return self.version
        if self.parent and self.parent.version:
            return self.parent.version
        raise errors.MissingVersionError(self.artifact_id)

    @property
    def resource_directories(self) -> list[str]:
        """Declared resource directories, in declaration order."""
        return [res.directory for res in self.resources if res.directory is not None]
