"""
Base Classes for READMIN

Controllers generated for registered resources inherit from these classes.
Each carries the route configuration a Resource reads its route helper
names from.
"""

from typing import Any, Dict, List, Optional

from readmin.config import Config


class AdminController:
    """
    Base class for all admin controllers.

    ``resources_configuration["self"]`` holds the route prefix (the namespace,
    or None for the root namespace) and the collection route name.

    Example:
        class PostsController(ResourceController):
            resources_configuration = {
                "self": {"route_prefix": "admin", "route_collection_name": "posts"}
            }
    """

    resources_configuration: Dict[str, Dict[str, Any]] = {
        "self": {"route_prefix": None, "route_collection_name": None}
    }

    @classmethod
    def route_prefix(cls) -> Optional[str]:
        return cls.resources_configuration["self"].get("route_prefix")

    @classmethod
    def route_collection_name(cls) -> Optional[str]:
        return cls.resources_configuration["self"].get("route_collection_name")


class ResourceController(AdminController):
    """
    Controller for one registered resource.

    ``resource`` is the Resource descriptor the controller was generated for.
    """

    resource: Any = None

    # REST actions every resource controller answers to
    default_actions: List[str] = list(Config.Internal.DEFAULT_ACTIONS)

    @classmethod
    def actions(cls) -> List[str]:
        """
        All action names: the REST defaults followed by custom
        member and collection actions in registration order.
        """
        names = list(cls.default_actions)
        if cls.resource is not None:
            names.extend(action.name for action in cls.resource.member_actions)
            names.extend(action.name for action in cls.resource.collection_actions)
        return names


class DashboardController(AdminController):
    """Controller for a namespace's dashboard page."""
