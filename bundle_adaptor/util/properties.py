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
"""Reader for Java-style ``.properties`` files."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from bundle_adaptor import errors

if TYPE_CHECKING:  # pragma: no cover
    import pathlib
    from collections.abc import Iterable, Iterator

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPE_REGEX = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def _logical_lines(lines: Iterable[str]) -> Iterator[str]:
    """Join continued lines and drop blank lines and comments."""
    pending: str | None = None
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if pending is None:
            line = line.lstrip(_WHITESPACE)
            if not line or line[0] in _COMMENT_MARKERS:
                continue
        else:
            line = pending + line.lstrip(_WHITESPACE)
        # An odd number of trailing backslashes continues the line.
        if (len(line) - len(line.rstrip("\\"))) % 2:
            pending = line[:-1]
            continue
        pending = None
        yield line
    if pending is not None:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    index = 0
    escaped = False
    while index < len(line):
        char = line[index]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    value = line[index:].lstrip(_WHITESPACE)
    if value and value[0] in _SEPARATORS:
        value = value[1:].lstrip(_WHITESPACE)
    return line[:index], value


def _unescape_match(match: re.Match[str]) -> str:
    escape = match.group(1)
    if len(escape) == 5:  # noqa: PLR2004 (\uXXXX)
        return chr(int(escape[1:], 16))
    return _ESCAPES.get(escape, escape)


def unescape(value: str) -> str:
    """Resolve backslash escapes in a properties key or value."""
    return _ESCAPE_REGEX.sub(_unescape_match, value)


def load_properties(lines: Iterable[str]) -> dict[str, str]:
    """Parse properties from an iterable of lines, such as an open text file.

    Later definitions of a key override earlier ones.

    :param lines: The lines to parse.
    :returns: A mapping of property names to their values.
    """
    properties: dict[str, str] = {}
    for line in _logical_lines(lines):
        key, value = _split_entry(line)
        properties[unescape(key)] = unescape(value)
    return properties


def read_properties_file(path: pathlib.Path) -> dict[str, str]:
    """Read a properties file.

    :raises BundleIOError: if the file cannot be read.
    """
    try:
        with path.open(encoding="utf-8") as file:
            return load_properties(file)
    except OSError as err:
        raise errors.BundleIOError.from_os_error(err) from err
    except UnicodeDecodeError as err:
        raise errors.BundleIOError(
            f"{path}: not a valid UTF-8 properties file",
            details=str(err),
        ) from err
