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
"""Shared data for all bundle-adaptor tests."""

from __future__ import annotations

import pathlib
import textwrap
from collections.abc import Iterable, Mapping
from typing import Protocol

import pytest
from bundle_adaptor import AdaptorRegistry, ConfigService

POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"


def make_pom(  # noqa: PLR0913
    artifact_id: str | None = "demo",
    *,
    packaging: str | None = "woapplication",
    version: str | None = "1.2.3",
    parent: Mapping[str, str | None] | None = None,
    resources: Iterable[str] = (),
    properties: Mapping[str, str] | None = None,
    namespace: str | None = POM_NAMESPACE,
) -> str:
    """Render a minimal POM.

    Parent values of None are written as empty elements.
    """
    lines = ["<modelVersion>4.0.0</modelVersion>"]
    if parent is not None:
        lines.append("<parent>")
        for key, value in parent.items():
            if value is None:
                lines.append(f"  <{key}/>")
            else:
                lines.append(f"  <{key}>{value}</{key}>")
        lines.append("</parent>")
    if artifact_id is not None:
        lines.append(f"<artifactId>{artifact_id}</artifactId>")
    if version is not None:
        lines.append(f"<version>{version}</version>")
    if packaging is not None:
        lines.append(f"<packaging>{packaging}</packaging>")
    if properties:
        lines.append("<properties>")
        lines.extend(f"  <{key}>{value}</{key}>" for key, value in properties.items())
        lines.append("</properties>")
    resources = list(resources)
    if resources:
        lines.append("<build><resources>")
        lines.extend(
            f"  <resource><directory>{directory}</directory></resource>"
            for directory in resources
        )
        lines.append("</resources></build>")
    xmlns = f' xmlns="{namespace}"' if namespace else ""
    body = textwrap.indent("\n".join(lines), "  ")
    header = '<?xml version="1.0" encoding="UTF-8"?>'
    return f"{header}\n<project{xmlns}>\n{body}\n</project>\n"


class PomWriter(Protocol):
    def __call__(
        self, directory: pathlib.Path, *args: object, **kwargs: object
    ) -> pathlib.Path: ...


@pytest.fixture
def write_pom() -> PomWriter:
    """Write a POM into a directory, creating the directory if needed."""

    def _write_pom(
        directory: pathlib.Path, *args: object, **kwargs: object
    ) -> pathlib.Path:
        directory.mkdir(parents=True, exist_ok=True)
        pom_path = directory / "pom.xml"
        pom_path.write_text(make_pom(*args, **kwargs))  # type: ignore[arg-type]
        return pom_path

    return _write_pom


@pytest.fixture
def bundle_root(tmp_path: pathlib.Path, write_pom: PomWriter) -> pathlib.Path:
    """An application bundle with a component, resources and compiled classes."""
    root = tmp_path / "demo"
    write_pom(root, resources=["src/main/resources", "src/main/components"])
    (root / "src/main/components/Main.wo").mkdir(parents=True)
    (root / "src/main/resources").mkdir(parents=True)
    classes = root / "target/classes"
    (classes / "your/app/components").mkdir(parents=True)
    (classes / "your/app/Application.class").touch()
    (classes / "your/app/Session.class").touch()
    (classes / "your/app/components/Main.class").touch()
    (classes / "your/app/Messages.properties").touch()
    return root


@pytest.fixture
def config_service() -> ConfigService:
    return ConfigService()


@pytest.fixture(autouse=True)
def reset_adaptors():
    AdaptorRegistry.reset()
    yield
    AdaptorRegistry.reset()


@pytest.fixture
def pom_text():
    """Render POM text without writing it anywhere."""
    return make_pom
