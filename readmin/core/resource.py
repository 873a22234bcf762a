"""
Resource Module

Per-model admin configuration and the conventional names derived from it.

A Resource is created once per registered model while the application is
being configured. Derived names are computed on first access and cached for
the lifetime of the Resource; nothing invalidates them afterwards.
"""

import logging
from functools import cached_property
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NewType, Optional, Type

from readmin.config import Config
from readmin.core.actions import ControllerAction
from readmin.core.base import AdminController
from readmin.core.registry import ControllerRegistry, controllers
from readmin.inflector import Inflector, default_inflector

logger = logging.getLogger(__name__)

# Name of a URL helper such as "admin_posts_path"
RouteName = NewType("RouteName", str)


def model_name(resource: Any) -> str:
    """
    Name of a model class, or the string itself for string references.

    Classes defined inside functions drop their ``<locals>`` prefix, nested
    classes keep their outer class: ``Blog.Post``.
    """
    if isinstance(resource, str):
        return resource
    qualname = getattr(resource, "__qualname__", None) or resource.__name__
    return qualname.rsplit("<locals>.", 1)[-1]


class Resource:
    """
    Admin configuration for one model.

    Args:
        resource: Model class (or model name) this resource describes
        options: Registration options merged over the config defaults.
            Recognised keys: ``namespace``, ``sort_order``, ``as``
            (``as_`` is accepted as an alias).
        config: Config class providing DEFAULT_NAMESPACE / DEFAULT_SORT_ORDER
        inflector: Inflector used for all name derivations
        controller_registry: Registry ``controller`` resolves names against

    Example:
        resource = Resource(Post, {"namespace": "admin"})
        resource.controller_name        # "Admin.PostsController"
        resource.plural_resource_name   # "Posts"
    """

    def __init__(
        self,
        resource: Any,
        options: Optional[Mapping[str, Any]] = None,
        config: Optional[Type[Config]] = None,
        inflector: Optional[Inflector] = None,
        controller_registry: Optional[ControllerRegistry] = None
    ):
        self._resource = resource
        self.config = config or Config
        self.inflector = inflector or default_inflector
        self.controller_registry = controller_registry if controller_registry is not None else controllers

        options = dict(options or {})
        if "as_" in options:
            options["as"] = options.pop("as_")
        self._options: Dict[str, Any] = {**self.config.defaults(), **options}

        self.sort_order = self._options["sort_order"]
        self.scope_to: Optional[str] = None
        self.scope_to_association_method: Optional[str] = None
        self.page_configs: Dict[str, Any] = {}
        self.member_actions: List[ControllerAction] = []
        self.collection_actions: List[ControllerAction] = []
        self.parent_menu_item_name: Optional[str] = None

        self._resource_name: Optional[str] = None
        self._resource_name_read = False

    def __repr__(self) -> str:
        return f"<Resource {model_name(self._resource)} namespace={self.namespace!r}>"

    @property
    def resource(self) -> Any:
        return self._resource

    @property
    def options(self) -> Mapping[str, Any]:
        return MappingProxyType(self._options)

    @property
    def namespace(self) -> Optional[str]:
        """Returns the namespace for the resource"""
        return self._options["namespace"]

    # Names
    # ============================

    @cached_property
    def underscored_resource_name(self) -> str:
        """
        An underscored safe representation of this resource.

        Uses the ``as`` option when given ("Category Pages" -> "category_page"),
        otherwise the model name without separators ("Blog.Post" -> "blog_post").
        An empty ``as`` string counts as not given.
        """
        custom = self._options.get("as")
        if custom:
            name = self.inflector.singularize(self.inflector.underscore(custom.replace(" ", "")))
        else:
            name = self.inflector.underscore(model_name(self._resource).replace(".", ""))
        logger.debug(f"Derived underscored name {name!r} for {model_name(self._resource)}")
        return name

    @property
    def camelized_resource_name(self) -> str:
        """A camelized safe representation for this resource"""
        return self.inflector.camelize(self.underscored_resource_name)

    @property
    def resource_name(self) -> str:
        """
        The name to call this resource.

        Defaults to the titleized underscored name. Once read, the value is
        fixed for the lifetime of the resource.
        """
        self._resource_name_read = True
        if self._resource_name is None:
            self._resource_name = self.inflector.titleize(self.underscored_resource_name)
        return self._resource_name

    @resource_name.setter
    def resource_name(self, value: str) -> None:
        if self._resource_name_read:
            logger.warning(
                f"Ignoring resource_name={value!r} for {model_name(self._resource)}: "
                f"already in use as {self._resource_name!r}"
            )
            return
        self._resource_name = value

    @cached_property
    def plural_resource_name(self) -> str:
        """Returns the plural version of this resource"""
        return self.inflector.pluralize(self.resource_name)

    @property
    def namespace_module_name(self) -> Optional[str]:
        """
        If the resource is namespaced, the camelized namespace
        ("admin" -> "Admin"), otherwise None. An empty namespace string is
        treated as no namespace.
        """
        if not self.namespace:
            return None
        return self.inflector.camelize(str(self.namespace))

    def _qualify(self, *parts: Optional[str]) -> str:
        return self.config.Internal.NAMESPACE_SEPARATOR.join(part for part in parts if part)

    @property
    def controller_name(self) -> str:
        """
        The controller class name for this resource within its namespace,
        e.g. "Admin.PostsController".
        """
        plural = self.inflector.pluralize(self.camelized_resource_name)
        return self._qualify(self.namespace_module_name, plural + self.config.Internal.CONTROLLER_SUFFIX)

    @cached_property
    def controller(self) -> Type[AdminController]:
        """
        The controller class for this resource.

        Raises:
            ControllerNotFoundError: If ``controller_name`` is not registered
        """
        return self.controller_registry.resolve(self.controller_name)

    @property
    def dashboard_controller_name(self) -> str:
        """The dashboard controller class name for this resource's namespace"""
        return self._qualify(self.namespace_module_name, self.config.Internal.DASHBOARD_CONTROLLER_NAME)

    # Routes
    # ============================

    @property
    def route_prefix(self) -> Optional[str]:
        """Returns the routes prefix for this resource"""
        return self.controller.resources_configuration["self"].get("route_prefix")

    @property
    def route_collection_path(self) -> RouteName:
        """
        The route helper name for the collection of this resource,
        e.g. "admin_posts_path".
        """
        internal = self.config.Internal
        parts = [
            self.route_prefix,
            self.controller.resources_configuration["self"].get("route_collection_name"),
            internal.ROUTE_HELPER_SUFFIX,
        ]
        return RouteName(internal.ROUTE_HELPER_SEPARATOR.join(part for part in parts if part))

    # Menu
    # ============================

    @property
    def menu_name(self) -> str:
        """
        Returns which menu to add the item to: the namespace, or the root
        menu when the namespace is None or "".
        """
        return self.namespace or self.config.Internal.ROOT_MENU_NAME

    def menu(self, parent: Optional[str] = None, **options: Any) -> None:
        """Set the menu options"""
        self.parent_menu_item_name = parent

    @cached_property
    def menu_item_name(self) -> str:
        """Returns the name to be displayed in the menu for this resource"""
        return self.plural_resource_name

    # Actions
    # ============================

    def member_action(self, name: str, method: str = "get", **options: Any) -> ControllerAction:
        action = ControllerAction(name, method, options)
        self.member_actions.append(action)
        return action

    def collection_action(self, name: str, method: str = "get", **options: Any) -> ControllerAction:
        action = ControllerAction(name, method, options)
        self.collection_actions.append(action)
        return action

    def clear_member_actions(self) -> None:
        self.member_actions = []

    def clear_collection_actions(self) -> None:
        self.collection_actions = []


__all__ = ["Resource", "RouteName", "model_name"]
