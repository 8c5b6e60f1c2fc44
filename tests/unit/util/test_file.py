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
"""Tests for walking bundle directories."""

import os

import pytest
from bundle_adaptor import errors
from bundle_adaptor.util import file


def test_walk(tmp_path):
    (tmp_path / "a/b").mkdir(parents=True)
    (tmp_path / "a/b/c.txt").touch()

    walked = {
        os.path.relpath(dirpath, tmp_path): (sorted(dirnames), filenames)
        for dirpath, dirnames, filenames in file.walk(tmp_path)
    }

    assert walked == {
        ".": (["a"], []),
        "a": (["b"], []),
        os.path.join("a", "b"): ([], ["c.txt"]),
    }


def test_walk_missing_directory(tmp_path):
    with pytest.raises(errors.BundleIOError, match="No such file or directory"):
        list(file.walk(tmp_path / "missing"))


def test_walk_does_not_follow_links(tmp_path):
    (tmp_path / "real").mkdir()
    (tmp_path / "real/inner").mkdir()
    (tmp_path / "project").mkdir()
    (tmp_path / "project/link").symlink_to(tmp_path / "real")

    dirpaths = [dirpath for dirpath, _, _ in file.walk(tmp_path / "project")]

    assert dirpaths == [str(tmp_path / "project")]
