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
"""Tests for project descriptor models."""

import pydantic
import pytest
import pytest_check
from bundle_adaptor import errors, models


@pytest.mark.parametrize(
    ("packaging", "is_bundle", "bundle_packaging"),
    [
        ("woapplication", True, models.BundlePackaging.APPLICATION),
        ("woframework", True, models.BundlePackaging.FRAMEWORK),
        ("jar", False, models.BundlePackaging.FRAMEWORK),
        ("library", False, models.BundlePackaging.FRAMEWORK),
        ("pom", False, models.BundlePackaging.FRAMEWORK),
    ],
)
def test_packaging(packaging, is_bundle, bundle_packaging):
    descriptor = models.ProjectDescriptor(artifact_id="demo", packaging=packaging)

    pytest_check.equal(descriptor.is_bundle, is_bundle)
    pytest_check.equal(descriptor.bundle_packaging, bundle_packaging)


def test_bundle_packaging_values_are_fixed():
    assert models.BUNDLE_PACKAGING == frozenset({"woapplication", "woframework"})
    with pytest.raises(AttributeError):
        models.BUNDLE_PACKAGING.add("jar")  # type: ignore[attr-defined]


@pytest.mark.parametrize(
    ("version", "parent", "expected"),
    [
        ("1.2.3", None, "1.2.3"),
        ("1.2.3", models.ParentReference(version="9.9"), "1.2.3"),
        (None, models.ParentReference(version="9.9"), "9.9"),
        ("", models.ParentReference(version="9.9"), "9.9"),
    ],
)
def test_resolved_version(version, parent, expected):
    descriptor = models.ProjectDescriptor(
        artifact_id="demo", version=version, parent=parent
    )

    assert descriptor.resolved_version == expected


@pytest.mark.parametrize(
    "parent", [None, models.ParentReference(), models.ParentReference(version="")]
)
def test_resolved_version_missing(parent):
    descriptor = models.ProjectDescriptor(artifact_id="demo", parent=parent)

    with pytest.raises(errors.MissingVersionError, match="'demo' has no version"):
        _ = descriptor.resolved_version


def test_resource_directories():
    descriptor = models.ProjectDescriptor(
        artifact_id="demo",
        resources=[
            models.Resource(directory="Resources"),
            models.Resource(),
            models.Resource(directory="WebServerResources"),
            models.Resource(directory="Resources"),
        ],
    )

    assert descriptor.resource_directories == [
        "Resources",
        "WebServerResources",
        "Resources",
    ]


def test_unmarshal_aliases():
    descriptor = models.ProjectDescriptor.unmarshal(
        {
            "artifactId": "demo",
            "groupId": "org.example",
            "parent": {"artifactId": "parent", "relativePath": "../parent"},
        }
    )

    pytest_check.equal(descriptor.artifact_id, "demo")
    pytest_check.equal(descriptor.group_id, "org.example")
    pytest_check.equal(
        descriptor.parent,
        models.ParentReference(artifact_id="parent", relative_path="../parent"),
    )


def test_unmarshal_not_dict():
    with pytest.raises(TypeError, match="not a dictionary"):
        models.ProjectDescriptor.unmarshal([])  # type: ignore[arg-type]


def test_descriptor_is_frozen():
    descriptor = models.ProjectDescriptor(artifact_id="demo")

    with pytest.raises(pydantic.ValidationError):
        descriptor.version = "1.0"  # type: ignore[misc]


def test_marshal():
    descriptor = models.ProjectDescriptor(
        artifact_id="demo",
        parent=models.ParentReference(version="9.9"),
    )

    assert descriptor.marshal() == {
        "artifactId": "demo",
        "parent": {"version": "9.9"},
    }
