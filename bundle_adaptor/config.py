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
"""Configuration service."""

from __future__ import annotations

import abc
import os
from collections.abc import Iterable
from typing import Any, TypeVar, cast, final

import pydantic
import pydantic_core
from craft_cli import emit
from typing_extensions import override

from bundle_adaptor import _config

T = TypeVar("T")

DEFAULT_ENVIRON_PREFIX = "BUNDLE_ADAPTOR"


class ConfigHandler(abc.ABC):
    """An abstract class for configuration handlers."""

    def __init__(self, config_model: type[_config.ConfigModel]) -> None:
        self._config_model = config_model

    @abc.abstractmethod
    def get_raw(self, item: str) -> Any:  # noqa: ANN401
        """Get the raw value for a configuration item.

        :param item: the name of the configuration item.
        :returns: The raw value of the item.
        :raises: KeyError if the item cannot be found.
        """


@final
class EnvironmentHandler(ConfigHandler):
    """Configuration handler to get values from prefixed environment variables."""

    def __init__(
        self,
        config_model: type[_config.ConfigModel],
        environ_prefix: str = DEFAULT_ENVIRON_PREFIX,
    ) -> None:
        super().__init__(config_model)
        self._environ_prefix = environ_prefix.upper()

    @override
    def get_raw(self, item: str) -> str:
        return os.environ[f"{self._environ_prefix}_{item.upper()}"]


@final
class DefaultConfigHandler(ConfigHandler):
    """Configuration handler for getting default values."""

    def __init__(self, config_model: type[_config.ConfigModel]) -> None:
        super().__init__(config_model)
        self._cache: dict[str, Any] = {}

    @override
    def get_raw(self, item: str) -> Any:
        if item in self._cache:
            return self._cache[item]

        field = self._config_model.model_fields[item]
        if field.default is not pydantic_core.PydanticUndefined:
            self._cache[item] = field.default
            return field.default
        if field.default_factory is not None:
            default = field.default_factory()  # type: ignore[call-arg]
            self._cache[item] = default
            return default

        raise KeyError(f"config item {item!r} has no default value.")


class ConfigService:
    """Configuration access for bundle adaptors.

    Items are looked up in the environment first, then in any extra handlers,
    then fall back to the defaults of the configuration model.
    """

    def __init__(
        self,
        config_model: type[_config.ConfigModel] = _config.ConfigModel,
        *,
        environ_prefix: str = DEFAULT_ENVIRON_PREFIX,
        extra_handlers: Iterable[type[ConfigHandler]] = (),
    ) -> None:
        self._config_model = config_model
        self._default_handler = DefaultConfigHandler(config_model)
        self._handlers: list[ConfigHandler] = [
            EnvironmentHandler(config_model, environ_prefix),
            *(handler(config_model) for handler in extra_handlers),
        ]
        emit.debug(
            f"Configuration handlers: "
            f"{', '.join(type(handler).__name__ for handler in self._handlers)}"
        )

    def get(self, item: str) -> Any:  # noqa: ANN401
        """Get the given configuration item."""
        if item not in self._config_model.model_fields:
            raise KeyError(f"unknown config item: {item!r}")
        field_info = self._config_model.model_fields[item]

        for handler in self._handlers:
            try:
                value = handler.get_raw(item)
            except KeyError:
                continue
            else:
                break
        else:
            return self._default_handler.get_raw(item)

        return self._convert_type(value, field_info.annotation)  # type: ignore[arg-type]

    def _convert_type(self, value: str, field_type: type[T]) -> T:
        """Convert the value to the appropriate type."""
        if isinstance(field_type, type) and issubclass(field_type, str):
            return cast(T, field_type(value))
        field_adapter = pydantic.TypeAdapter(field_type)
        return field_adapter.validate_strings(value)
