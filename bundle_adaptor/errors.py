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
"""Error classes for bundle-adaptor.

All errors inherit from craft_cli.CraftError.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from craft_cli import CraftError

from bundle_adaptor.util.error_formatting import format_pydantic_errors

if TYPE_CHECKING:  # pragma: no cover
    import pathlib
    from xml.etree.ElementTree import ParseError

    import pydantic
    from typing_extensions import Self


class BundleAdaptorError(CraftError):
    """Base class for errors raised while adapting a bundle."""


class ProjectFileError(BundleAdaptorError):
    """Errors to do with the project descriptor or directory."""


class DescriptorMissingError(ProjectFileError, FileNotFoundError):
    """The project descriptor does not exist."""

    def __init__(self, path: pathlib.Path) -> None:
        super().__init__(
            f"Project descriptor not found: {path}",
            resolution="Ensure the bundle root contains a project descriptor.",
            logpath_report=False,
            reportable=False,
            retcode=os.EX_NOINPUT,
        )


class DescriptorInvalidError(ProjectFileError):
    """The project descriptor exists but cannot be parsed."""

    @classmethod
    def from_parse_error(cls, path: pathlib.Path, error: ParseError) -> Self:
        """Convert an ElementTree parse error into a DescriptorInvalidError."""
        return cls(
            f"error parsing {path.name!r}",
            details=f"{path}: {error}",
            resolution=f"Ensure {path.name} contains valid XML",
            logpath_report=False,
            reportable=False,
            retcode=os.EX_DATAERR,
        )


class DescriptorCycleError(ProjectFileError):
    """A chain of parent descriptors refers back to itself."""

    def __init__(self, path: pathlib.Path) -> None:
        super().__init__(
            f"Parent descriptor chain loops back to {path}",
            resolution="Check the 'relativePath' of each parent reference.",
            logpath_report=False,
            reportable=False,
            retcode=os.EX_DATAERR,
        )


class MissingVersionError(ProjectFileError):
    """Neither the descriptor nor its parent declares a version."""

    def __init__(self, artifact_id: str) -> None:
        super().__init__(
            f"Project {artifact_id!r} has no version.",
            details="Neither the project nor its parent declares a version.",
            resolution="Add a 'version' to the project or its parent.",
            logpath_report=False,
            reportable=False,
            retcode=os.EX_DATAERR,
        )


class OutputDirectoryMissingError(BundleAdaptorError, FileNotFoundError):
    """The compiled output directory does not exist."""

    def __init__(self, directory: pathlib.Path) -> None:
        super().__init__(
            f"Compiled output directory missing: {directory}",
            resolution="Build the project before loading it as a bundle.",
            logpath_report=False,
            reportable=False,
            retcode=os.EX_NOINPUT,
        )


class NotAdaptableError(BundleAdaptorError, ValueError):
    """The given path is not inside a bundle this adaptor understands."""

    def __init__(self, path: str | pathlib.Path) -> None:
        super().__init__(
            f"Path is not inside an adaptable bundle: {path}",
            details="Check 'is_adaptable' before asking for the bundle path.",
            retcode=os.EX_SOFTWARE,
        )


class BundleIOError(BundleAdaptorError):
    """An underlying read error while inspecting a bundle."""

    @classmethod
    def from_os_error(cls, err: OSError) -> Self:
        """Create a BundleIOError from an OSError."""
        message = (
            f"{err.filename}: {err.strerror}" if err.filename else str(err.strerror)
        )
        details = err.__class__.__name__
        if err.filename:
            details += f": filename: {err.filename!r}"
        if err.filename2:
            details += f", filename2: {err.filename2!r}"
        return cls(message, details=details)


class CraftValidationError(BundleAdaptorError):
    """Error validating the contents of a project descriptor."""

    @classmethod
    def from_pydantic(
        cls,
        error: pydantic.ValidationError,
        *,
        file_name: str = "pom.xml",
        **kwargs: str | bool | int | None,
    ) -> Self:
        """Convert this error from a pydantic ValidationError.

        :param error: The pydantic error to convert
        :param file_name: An optional file name of the malformed descriptor
        :param kwargs: additional keyword arguments get passed to CraftError
        """
        message = format_pydantic_errors(error.errors(), file_name=file_name)
        return cls(message, **kwargs)  # type: ignore[arg-type]
