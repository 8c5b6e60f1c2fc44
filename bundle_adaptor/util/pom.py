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
"""Helpers for reading Maven project descriptors."""

from __future__ import annotations

import pathlib
from typing import Any
from xml.etree import ElementTree

import pydantic
from craft_cli import emit

from bundle_adaptor import errors, models

_IDENTITY_TAGS = ("groupId", "artifactId", "version", "packaging", "name")
_PARENT_TAGS = ("groupId", "artifactId", "version")


def _local_name(tag: str) -> str:
    """Strip the XML namespace from an element tag."""
    return tag.rpartition("}")[2]


def _text(element: ElementTree.Element | None) -> str | None:
    if element is None or element.text is None:
        return None
    return element.text.strip() or None


def _parse_parent(element: ElementTree.Element) -> dict[str, Any]:
    parent: dict[str, Any] = {}
    for tag in _PARENT_TAGS:
        value = _text(element.find(f"{{*}}{tag}"))
        if value is not None:
            parent[tag] = value
    relative_path = element.find("{*}relativePath")
    if relative_path is not None:
        # An empty <relativePath/> disables the filesystem lookup.
        parent["relativePath"] = (relative_path.text or "").strip()
    return parent


def _parse_resources(project: ElementTree.Element) -> list[dict[str, Any]]:
    return [
        {"directory": _text(resource.find("{*}directory"))}
        for resource in project.iterfind("{*}build/{*}resources/{*}resource")
    ]


def _parse_properties(project: ElementTree.Element) -> dict[str, str]:
    properties = project.find("{*}properties")
    if properties is None:
        return {}
    return {
        _local_name(prop.tag): (prop.text or "").strip()
        for prop in properties
        if isinstance(prop.tag, str)
    }


def parse_descriptor(project: ElementTree.Element) -> dict[str, Any]:
    """Convert a ``<project>`` element into raw descriptor data.

    Only the elements used to load a bundle are read. Missing elements are
    left out so that model defaults apply.
    """
    data: dict[str, Any] = {}
    for tag in _IDENTITY_TAGS:
        value = _text(project.find(f"{{*}}{tag}"))
        if value is not None:
            data[tag] = value
    parent = project.find("{*}parent")
    if parent is not None:
        data["parent"] = _parse_parent(parent)
    data["resources"] = _parse_resources(project)
    data["properties"] = _parse_properties(project)
    return data


def load_descriptor(path: pathlib.Path) -> models.ProjectDescriptor:
    """Load a project descriptor from a file.

    :param path: The path to the descriptor file.
    :returns: The parsed descriptor.
    :raises DescriptorMissingError: if the file does not exist.
    :raises DescriptorInvalidError: if the file is not a valid descriptor.
    :raises CraftValidationError: if the descriptor has invalid contents.
    :raises BundleIOError: if the file cannot be read.
    """
    emit.trace(f"Loading project descriptor {str(path)!r}")
    try:
        tree = ElementTree.parse(path)
    except FileNotFoundError:
        raise errors.DescriptorMissingError(path) from None
    except ElementTree.ParseError as err:
        raise errors.DescriptorInvalidError.from_parse_error(path, err) from err
    except OSError as err:
        raise errors.BundleIOError.from_os_error(err) from err

    project = tree.getroot()
    if _local_name(project.tag) != "project":
        raise errors.DescriptorInvalidError(
            f"error parsing {path.name!r}: not a project descriptor",
            details=f"Root element is {_local_name(project.tag)!r}, not 'project'.",
            resolution=f"Ensure {path.name} is a Maven project descriptor",
            logpath_report=False,
            reportable=False,
        )

    try:
        return models.ProjectDescriptor.unmarshal(parse_descriptor(project))
    except pydantic.ValidationError as err:
        raise errors.CraftValidationError.from_pydantic(
            err, file_name=path.name
        ) from None
