"""
Controller Registry Module

Resolves qualified controller names ("Admin.PostsController") to controller
classes and keeps the table of route helper names ("admin_posts_path") to
URL paths. Populated while resources are registered at startup.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type

from readmin.core.base import AdminController
from readmin.exceptions import ControllerNotFoundError

logger = logging.getLogger(__name__)


class ControllerRegistry:
    """
    Name -> controller class lookup for the admin layer.

    Example:
        registry = ControllerRegistry()
        registry.define_controller("Admin.PostsController", ResourceController,
                                   resources_configuration={...})
        registry.resolve("Admin.PostsController")
    """

    def __init__(self):
        self._controllers: Dict[str, Type[AdminController]] = {}
        self._routes: Dict[str, str] = {}

    def register(self, name: str, controller: Type[AdminController]) -> Type[AdminController]:
        """
        Register a controller class under its qualified name.

        Args:
            name: Qualified name (e.g., "Admin.PostsController")
            controller: Controller class

        Returns:
            The registered controller class
        """
        if name in self._controllers and self._controllers[name] is not controller:
            logger.warning(f"Replacing registered controller: {name}")
        self._controllers[name] = controller
        return controller

    def lookup(self, name: str) -> Optional[Type[AdminController]]:
        """Return the controller registered under ``name``, or None."""
        return self._controllers.get(name)

    def resolve(self, name: str) -> Type[AdminController]:
        """
        Resolve a qualified name to its controller class.

        Raises:
            ControllerNotFoundError: If nothing is registered under ``name``
        """
        controller = self.lookup(name)
        if controller is None:
            raise ControllerNotFoundError(name)
        return controller

    def define_controller(
        self,
        name: str,
        base: Type[AdminController],
        separator: str = ".",
        **attrs: Any
    ) -> Type[AdminController]:
        """
        Build a controller subclass of ``base`` and register it.

        The class gets the last segment of ``name`` as ``__name__`` and the
        full qualified name as ``__qualname__``.

        Args:
            name: Qualified name (e.g., "Admin.PostsController")
            base: Controller base class
            separator: Namespace separator used in ``name``
            **attrs: Class attributes (resources_configuration, resource, ...)
        """
        class_name = name.rsplit(separator, 1)[-1]
        controller = type(class_name, (base,), dict(attrs))
        controller.__qualname__ = name
        controller.__module__ = __name__
        return self.register(name, controller)

    def names(self):
        return sorted(self._controllers)

    # Route table
    # ============================

    def add_route(self, route_name: str, path: str) -> None:
        """Map a route helper name to its URL path."""
        existing = self._routes.get(route_name)
        if existing is not None and existing != path:
            logger.warning(f"Route {route_name} changed from {existing} to {path}")
        self._routes[route_name] = path

    def path_for(self, route_name: str) -> str:
        """
        Get the URL path for a route helper name.

        Raises:
            KeyError: If the route is unknown
        """
        if route_name not in self._routes:
            raise KeyError(f"Route not found: {route_name}")
        return self._routes[route_name]

    @property
    def routes(self) -> Mapping[str, str]:
        return MappingProxyType(self._routes)

    def clear(self) -> None:
        self._controllers.clear()
        self._routes.clear()

    def __contains__(self, name: str) -> bool:
        return name in self._controllers

    def __len__(self) -> int:
        return len(self._controllers)


# Process-wide registry
controllers = ControllerRegistry()


__all__ = ["ControllerRegistry", "controllers"]
