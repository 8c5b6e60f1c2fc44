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
"""Utilities for bundle-adaptor."""

from bundle_adaptor.util.file import walk
from bundle_adaptor.util.pom import load_descriptor
from bundle_adaptor.util.properties import load_properties, read_properties_file

__all__ = [
    "walk",
    "load_descriptor",
    "load_properties",
    "read_properties_file",
]
