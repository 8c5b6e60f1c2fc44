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
"""Unit tests for the configuration service."""

import string

import pydantic
import pytest
from bundle_adaptor import ConfigModel, config
from hypothesis import given, strategies


class FakeConfigModel(ConfigModel):
    my_int: int = 3
    my_flag: bool = False
    my_required: str


@pytest.fixture(scope="module")
def environment_handler() -> config.EnvironmentHandler:
    return config.EnvironmentHandler(ConfigModel)


@pytest.fixture(scope="module")
def default_config_handler() -> config.DefaultConfigHandler:
    return config.DefaultConfigHandler(FakeConfigModel)


@given(
    item=strategies.text(alphabet=string.ascii_letters + "_", min_size=1),
    content=strategies.text(
        alphabet=strategies.characters(categories=["L", "M", "N", "P", "S", "Z"])
    ),
)
def test_environment_handler(environment_handler, item: str, content: str):
    with pytest.MonkeyPatch.context() as monkeypatch:
        monkeypatch.setenv(f"BUNDLE_ADAPTOR_{item.upper()}", content)

        assert environment_handler.get_raw(item) == content


def test_environment_handler_missing(monkeypatch, environment_handler):
    monkeypatch.delenv("BUNDLE_ADAPTOR_COMPONENT_SUFFIX", raising=False)

    with pytest.raises(KeyError):
        environment_handler.get_raw("component_suffix")


def test_environment_handler_custom_prefix(monkeypatch):
    monkeypatch.setenv("MYLOADER_CLASSES_DIRECTORY", "bin")
    handler = config.EnvironmentHandler(ConfigModel, "myloader")

    assert handler.get_raw("classes_directory") == "bin"


@pytest.mark.parametrize(
    ("item", "expected"),
    [
        ("my_flag", False),
        ("descriptor_file_name", "pom.xml"),
        ("build_properties_file_name", "build.properties"),
        ("bundle_properties_file_name", "Properties"),
        ("classes_directory", "target/classes"),
        ("class_file_suffix", ".class"),
        ("component_suffix", ".wo"),
        ("my_int", 3),
    ],
)
def test_default_config_handler_success(default_config_handler, item, expected):
    assert default_config_handler.get_raw(item) == expected


def test_default_config_handler_no_default(default_config_handler):
    with pytest.raises(KeyError, match="has no default value"):
        default_config_handler.get_raw("my_required")


@pytest.mark.parametrize(
    ("item", "environment_variables", "expected"),
    [
        ("descriptor_file_name", {}, "pom.xml"),
        (
            "descriptor_file_name",
            {"BUNDLE_ADAPTOR_DESCRIPTOR_FILE_NAME": "project.xml"},
            "project.xml",
        ),
        ("component_suffix", {"BUNDLE_ADAPTOR_COMPONENT_SUFFIX": ".wox"}, ".wox"),
    ],
)
def test_config_service_converts_type(
    monkeypatch: pytest.MonkeyPatch,
    item: str,
    environment_variables: dict[str, str],
    expected,
):
    for key, value in environment_variables.items():
        monkeypatch.setenv(key, value)

    assert config.ConfigService().get(item) == expected


def test_config_service_pydantic_conversion(monkeypatch):
    monkeypatch.setenv("BUNDLE_ADAPTOR_MY_INT", "42")
    service = config.ConfigService(FakeConfigModel)

    assert service.get("my_int") == 42


def test_config_service_invalid_value(monkeypatch):
    monkeypatch.setenv("BUNDLE_ADAPTOR_MY_INT", "lots")
    service = config.ConfigService(FakeConfigModel)

    with pytest.raises(pydantic.ValidationError):
        service.get("my_int")


def test_config_service_unknown_item():
    with pytest.raises(KeyError, match="unknown config item: 'nothing'"):
        config.ConfigService().get("nothing")


def test_config_service_extra_handler(monkeypatch):
    class FixedHandler(config.ConfigHandler):
        def get_raw(self, item: str) -> str:
            if item == "classes_directory":
                return "build/classes"
            raise KeyError(item)

    monkeypatch.delenv("BUNDLE_ADAPTOR_CLASSES_DIRECTORY", raising=False)
    service = config.ConfigService(extra_handlers=[FixedHandler])

    assert service.get("classes_directory") == "build/classes"
    assert service.get("component_suffix") == ".wo"


def test_config_service_environment_beats_extra_handler(monkeypatch):
    class FixedHandler(config.ConfigHandler):
        def get_raw(self, item: str) -> str:
            return "build/classes"

    monkeypatch.setenv("BUNDLE_ADAPTOR_CLASSES_DIRECTORY", "bin")
    service = config.ConfigService(extra_handlers=[FixedHandler])

    assert service.get("classes_directory") == "bin"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        *((value, True) for value in ["true", "1", "yes", "Y", "on"]),
        *((value, False) for value in ["false", "0", "no", "N", "off"]),
    ],
)
def test_config_service_bool_conversion(monkeypatch, value, expected):
    monkeypatch.setenv("BUNDLE_ADAPTOR_MY_FLAG", value)
    service = config.ConfigService(FakeConfigModel)

    assert service.get("my_flag") is expected


def test_config_service_invalid_bool(monkeypatch):
    monkeypatch.setenv("BUNDLE_ADAPTOR_MY_FLAG", "maybe")
    service = config.ConfigService(FakeConfigModel)

    with pytest.raises(pydantic.ValidationError):
        service.get("my_flag")
