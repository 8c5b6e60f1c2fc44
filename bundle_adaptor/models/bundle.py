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
"""Bundle metadata handed back to the bundle loader."""

from __future__ import annotations

import enum
import pathlib
from typing import Any, Final

import pydantic

from bundle_adaptor.models import base

BUNDLE_SIGNATURE: Final = "webo"
MANIFEST_IMPLEMENTATION_VERSION: Final = "0"

# Keys of the bundle-info dictionary understood by the loader.
CF_BUNDLE_PACKAGE_TYPE_KEY: Final = "CFBundlePackageType"
CF_BUNDLE_SHORT_VERSION_STRING_KEY: Final = "CFBundleShortVersionString"
CF_BUNDLE_SIGNATURE_KEY: Final = "CFBundleSignature"
EO_ADAPTOR_CLASS_NAME_KEY: Final = "EOAdaptorClassName"
HAS_WOCOMPONENTS_KEY: Final = "Has_WOComponents"
MANIFEST_IMPLEMENTATION_VERSION_KEY: Final = "Manifest-Implementation-Version"
NS_EXECUTABLE_KEY: Final = "NSExecutable"
NS_PRINCIPAL_CLASS_KEY: Final = "NSPrincipalClass"


class BundlePackaging(str, enum.Enum):
    """The kind of bundle a project produces."""

    APPLICATION = "APPL"
    FRAMEWORK = "FMWK"

    def __str__(self) -> str:
        return self.value


class BundleMetadata(base.CraftBaseModel):
    """Metadata describing a single bundle.

    A new instance is built for every query and is never modified afterwards.
    """

    model_config = pydantic.ConfigDict(frozen=True)

    package_type: BundlePackaging = pydantic.Field(alias=CF_BUNDLE_PACKAGE_TYPE_KEY)
    executable: str = pydantic.Field(alias=NS_EXECUTABLE_KEY)
    short_version: str = pydantic.Field(alias=CF_BUNDLE_SHORT_VERSION_STRING_KEY)
    principal_class: str | None = pydantic.Field(
        default=None, alias=NS_PRINCIPAL_CLASS_KEY
    )
    eo_adaptor_class_name: str | None = pydantic.Field(
        default=None, alias=EO_ADAPTOR_CLASS_NAME_KEY
    )
    signature: str = pydantic.Field(
        default=BUNDLE_SIGNATURE, alias=CF_BUNDLE_SIGNATURE_KEY
    )
    has_components: bool = pydantic.Field(default=False, alias=HAS_WOCOMPONENTS_KEY)
    manifest_implementation_version: str = pydantic.Field(
        default=MANIFEST_IMPLEMENTATION_VERSION,
        alias=MANIFEST_IMPLEMENTATION_VERSION_KEY,
    )
    class_names: list[str] = pydantic.Field(default_factory=list)
    resource_paths: list[pathlib.Path] = pydantic.Field(default_factory=list)

    @property
    def is_application(self) -> bool:
        """Whether this bundle is an application."""
        return self.package_type == BundlePackaging.APPLICATION

    def marshal(self) -> dict[str, Any]:
        """Convert to the loader's bundle-info dictionary.

        Unset optional values are left out, as are the class and resource
        listings, which the loader asks for separately.
        """
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"class_names", "resource_paths"},
        )
