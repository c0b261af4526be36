"""Host-owned holder for the current config module instances."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Type, TypeVar

from .module import ConfigModule

if TYPE_CHECKING:
    from configfactory.core.registry import BuilderRegistry
    from configfactory.presentation.model import ConfigPageModel

M = TypeVar("M", bound=ConfigModule)


@dataclass
class ConfigContext:
    """Runtime bookkeeping for the settings of one application.

    Holds exactly one current instance per module type. Editors mutate that
    instance in place; :meth:`reload` replaces it wholesale.
    """

    modules: Dict[type, ConfigModule] = field(default_factory=dict)

    def get(self, module_type: Type[M]) -> M:
        module = self.modules.get(module_type)
        if module is None:
            module = module_type.load()
            self.modules[module_type] = module
        return module  # type: ignore[return-value]

    def install(self, module: ConfigModule) -> ConfigModule:
        self.modules[type(module)] = module
        return module

    def reload(self, module_type: Type[M]) -> M:
        module = module_type.load()
        self.modules[module_type] = module
        return module

    def __contains__(self, module_type: type) -> bool:
        return module_type in self.modules

    def build_page(self, *module_types: Type[ConfigModule], registry: "BuilderRegistry | None" = None) -> "ConfigPageModel":
        """Assemble one page holding the current instance of each module type."""
        from configfactory.presentation.factory import append
        from configfactory.presentation.model import ConfigPageModel

        page = ConfigPageModel()
        for module_type in module_types:
            append(page, self.get(module_type), registry=registry)
        return page

    def teardown(self) -> None:
        logging.debug("Releasing %d config module(s).", len(self.modules))
        self.modules.clear()


__all__ = ["ConfigContext"]
