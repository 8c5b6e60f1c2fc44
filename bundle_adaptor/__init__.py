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
"""Load Maven projects as application and framework bundles."""

from bundle_adaptor import errors, models
from bundle_adaptor._config import ConfigModel
from bundle_adaptor.adaptors import (
    AdaptorRegistry,
    BundleAdaptorProvider,
    MavenBundleAdaptor,
)
from bundle_adaptor.classes import list_compiled_classes
from bundle_adaptor.config import ConfigService
from bundle_adaptor.locator import adaptor_bundle_path, is_adaptable, locate
from bundle_adaptor.metadata import extract_metadata
from bundle_adaptor.resources import resource_paths

try:
    from ._version import __version__
except ImportError:  # pragma: no cover
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("bundle-adaptor")
    except PackageNotFoundError:
        __version__ = "dev"

__all__ = [
    "__version__",
    "AdaptorRegistry",
    "BundleAdaptorProvider",
    "ConfigModel",
    "ConfigService",
    "MavenBundleAdaptor",
    "adaptor_bundle_path",
    "errors",
    "extract_metadata",
    "is_adaptable",
    "list_compiled_classes",
    "locate",
    "models",
    "resource_paths",
]
