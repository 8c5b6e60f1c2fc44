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
"""Registration of bundle adaptor providers."""

from __future__ import annotations

import importlib
import traceback
from importlib import metadata
from typing import TYPE_CHECKING, ClassVar, Final, cast

from craft_cli import emit

from bundle_adaptor.adaptors import base
from bundle_adaptor.config import ConfigService

if TYPE_CHECKING:  # pragma: no cover
    import os

PLUGIN_ENTRY_POINT_GROUP: Final = "bundle_adaptor.providers"

_DEFAULT_ADAPTORS = {
    "maven": ("bundle_adaptor.adaptors.maven", "MavenBundleAdaptor"),
}


class AdaptorRegistry:
    """Registry of the bundle adaptor providers available to a bundle loader.

    Adaptor classes are registered on the class, so every registry sees the
    same set of adaptors. Each registry instance creates its own adaptors, in
    registration order, with the configuration it was given.

    :param config: The configuration passed to every adaptor this registry creates.
    """

    _adaptor_classes: ClassVar[
        dict[str, tuple[str, str] | type[base.BundleAdaptorProvider]]
    ] = {}

    def __init__(self, config: ConfigService | None = None) -> None:
        self._config = config or ConfigService()
        self._adaptors: dict[str, base.BundleAdaptorProvider] = {}

    @classmethod
    def register(
        cls,
        name: str,
        adaptor_class: type[base.BundleAdaptorProvider] | str,
        *,
        module: str | None = None,
    ) -> None:
        """Register an adaptor class with a given name.

        :param name: the name to call the adaptor.
        :param adaptor_class: either an adaptor class or a string that names the
            adaptor class.
        :param module: If adaptor_class is a string, the module from which to import
            the adaptor class.
        """
        if isinstance(adaptor_class, str):
            if module is None:
                raise KeyError("Must set module if adaptor_class is set by name.")
            cls._adaptor_classes[name] = (module, adaptor_class)
        else:
            if module is not None:
                raise KeyError(
                    "Must not set module if adaptor_class is passed by value."
                )
            cls._adaptor_classes[name] = adaptor_class
        emit.debug(f"Registered bundle adaptor {name!r}")

    @classmethod
    def reset(cls) -> None:
        """Reset the registered adaptors to the built-in ones."""
        cls._adaptor_classes.clear()
        for name, (module, class_name) in _DEFAULT_ADAPTORS.items():
            cls._adaptor_classes[name] = (module, class_name)

    @classmethod
    def load_plugins(cls, group: str = PLUGIN_ENTRY_POINT_GROUP) -> None:
        """Register the adaptor classes published by installed distributions.

        Each entry point in ``group`` names an adaptor class and is registered
        under the entry point's name. Entry points that fail to load are
        reported and skipped.
        """
        for entry_point in metadata.entry_points(group=group):
            emit.debug(f"Loading bundle adaptor plugin {entry_point.name}")
            try:
                adaptor_class = entry_point.load()
            except Exception:  # noqa: BLE001
                emit.progress(
                    f"Failed to load bundle adaptor plugin {entry_point.name}",
                    permanent=True,
                )
                emit.debug(traceback.format_exc())
                continue
            cls.register(entry_point.name, adaptor_class)

    @classmethod
    def get_class(cls, name: str) -> type[base.BundleAdaptorProvider]:
        """Get the class for an adaptor by its name."""
        if name not in cls._adaptor_classes:
            valid = ", ".join(repr(known) for known in sorted(cls._adaptor_classes))
            raise AttributeError(
                f"Not a registered bundle adaptor: {name!r}. "
                f"Valid adaptors are {valid}."
            )
        adaptor_info = cls._adaptor_classes[name]
        if isinstance(adaptor_info, tuple):
            module_name, class_name = adaptor_info
            module = importlib.import_module(module_name)
            return cast(type[base.BundleAdaptorProvider], getattr(module, class_name))
        return adaptor_info

    @classmethod
    def names(cls) -> list[str]:
        """Get the names of the registered adaptors, in registration order."""
        return list(cls._adaptor_classes)

    def get(self, name: str) -> base.BundleAdaptorProvider:
        """Get an adaptor by name, creating it on first use."""
        if name not in self._adaptors:
            self._adaptors[name] = self.get_class(name)(config=self._config)
        return self._adaptors[name]

    def find(
        self, bundle_path: str | os.PathLike[str]
    ) -> base.BundleAdaptorProvider | None:
        """Get the first registered adaptor that can adapt ``bundle_path``.

        :returns: The adaptor, or None if no registered adaptor can adapt the path.
        """
        for name in self.names():
            adaptor = self.get(name)
            if adaptor.is_adaptable(bundle_path):
                emit.debug(f"Bundle adaptor {name!r} adapts {str(bundle_path)!r}")
                return adaptor
        return None


AdaptorRegistry.reset()  # Set up default adaptors on import.
