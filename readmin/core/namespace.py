"""
Namespace Module

Registers models into admin namespaces and generates their controllers.

    from readmin import register

    posts = register(Post)                       # Admin.PostsController, admin_posts_path
    pages = register(Page, as_="Category Page")  # Admin.CategoryPagesController
    users = register(User, namespace=None)       # UsersController, users_path
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Type

from readmin.config import Config
from readmin.core.base import DashboardController, ResourceController
from readmin.core.registry import ControllerRegistry, controllers
from readmin.core.resource import Resource, model_name
from readmin.inflector import Inflector, default_inflector

logger = logging.getLogger(__name__)


class Namespace:
    """
    A group of resources sharing a controller module, route prefix and menu.

    The root namespace has ``name`` None: its controllers are not prefixed
    and its routes live directly under "/".
    """

    def __init__(self, application: "Application", name: Optional[str]):
        self.application = application
        self.name = name
        self.resources: Dict[str, Resource] = {}
        self.dashboard_controller: Optional[Type[DashboardController]] = None

    def __repr__(self) -> str:
        return f"<Namespace {self.name!r} resources={len(self.resources)}>"

    @property
    def config(self) -> Type[Config]:
        return self.application.config

    @property
    def registry(self) -> ControllerRegistry:
        return self.application.registry

    @property
    def module_name(self) -> Optional[str]:
        if not self.name:
            return None
        return self.application.inflector.camelize(str(self.name))

    @property
    def route_prefix(self) -> Optional[str]:
        return str(self.name) if self.name else None

    def path(self, *segments: str) -> str:
        """URL path inside this namespace: path("posts") -> "/admin/posts"."""
        parts = [self.route_prefix, *segments]
        return "/" + "/".join(part for part in parts if part)

    def register(self, model: Any, **options: Any) -> Resource:
        """
        Register a model in this namespace.

        Registering a model whose camelized name is already known returns
        the existing Resource unchanged.

        Args:
            model: Model class or model name
            **options: Resource options (``sort_order``, ``as_``)

        Returns:
            The Resource for the model
        """
        options["namespace"] = self.name
        resource = Resource(
            model,
            options,
            config=self.config,
            inflector=self.application.inflector,
            controller_registry=self.registry,
        )

        existing = self.resources.get(resource.camelized_resource_name)
        if existing is not None:
            logger.debug(f"{model_name(model)} already registered as {existing.controller_name}")
            return existing

        self.resources[resource.camelized_resource_name] = resource
        self._register_dashboard(resource)
        self._register_resource_controller(resource)

        if self.config.VERBOSE_LOGGING:
            logger.info(
                f"Registered {model_name(model)} as {resource.controller_name} "
                f"({resource.route_collection_path} -> {self.registry.path_for(resource.route_collection_path)})"
            )
        return resource

    def resource_for(self, model: Any) -> Optional[Resource]:
        """Find the Resource registered for a model class or model name."""
        for resource in self.resources.values():
            if resource.resource is model or model_name(resource.resource) == model_name(model):
                return resource
        return None

    def menu_items(self) -> Dict[Optional[str], List[str]]:
        """
        Menu item names grouped by parent menu item.

        Top-level items are under the None key. Items are sorted by name.
        """
        menu: Dict[Optional[str], List[str]] = {}
        for resource in self.resources.values():
            menu.setdefault(resource.parent_menu_item_name, []).append(resource.menu_item_name)
        return {parent: sorted(items) for parent, items in menu.items()}

    def _register_resource_controller(self, resource: Resource) -> None:
        collection_name = self.application.inflector.pluralize(resource.underscored_resource_name)
        self.registry.define_controller(
            resource.controller_name,
            ResourceController,
            separator=self.config.Internal.NAMESPACE_SEPARATOR,
            resource=resource,
            resources_configuration={
                "self": {
                    "route_prefix": self.route_prefix,
                    "route_collection_name": collection_name,
                }
            },
        )
        self.registry.add_route(resource.route_collection_path, self.path(collection_name))

    def _register_dashboard(self, resource: Resource) -> None:
        if self.dashboard_controller is not None:
            return

        internal = self.config.Internal
        self.dashboard_controller = self.registry.define_controller(
            resource.dashboard_controller_name,
            DashboardController,
            separator=internal.NAMESPACE_SEPARATOR,
            resources_configuration={
                "self": {"route_prefix": self.route_prefix, "route_collection_name": "dashboard"}
            },
        )
        parts = [self.route_prefix, "dashboard", internal.ROUTE_HELPER_SUFFIX]
        route_name = internal.ROUTE_HELPER_SEPARATOR.join(part for part in parts if part)
        self.registry.add_route(route_name, self.path())


class Application:
    """
    All namespaces of one admin site.

    Args:
        config: Config class providing registration defaults
        registry: Controller registry generated controllers are added to
        inflector: Inflector shared by every resource
    """

    def __init__(
        self,
        config: Optional[Type[Config]] = None,
        registry: Optional[ControllerRegistry] = None,
        inflector: Optional[Inflector] = None
    ):
        self.config = config or Config
        self.registry = registry if registry is not None else controllers
        self.inflector = inflector or default_inflector
        self.namespaces: Dict[Optional[str], Namespace] = {}

    def namespace(self, name: Optional[str]) -> Namespace:
        """Get or create the namespace called ``name`` (None for root)."""
        if name not in self.namespaces:
            self.namespaces[name] = Namespace(self, name)
        return self.namespaces[name]

    def register(self, model: Any, **options: Any) -> Resource:
        """
        Register a model, in ``namespace`` or the configured default namespace.
        """
        name = options.pop("namespace", self.config.DEFAULT_NAMESPACE)
        return self.namespace(name).register(model, **options)

    def resources(self) -> Iterator[Resource]:
        for namespace in self.namespaces.values():
            yield from namespace.resources.values()

    def unload(self) -> None:
        """Forget every namespace and generated controller."""
        self.namespaces.clear()
        self.registry.clear()


# Default admin site
application = Application()


def register(model: Any, **options: Any) -> Resource:
    """Register a model with the default application."""
    return application.register(model, **options)


__all__ = ["Namespace", "Application", "application", "register"]
