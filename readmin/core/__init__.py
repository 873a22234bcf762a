"""
READMIN Core Module
"""

from readmin.core.actions import ControllerAction
from readmin.core.base import AdminController, DashboardController, ResourceController
from readmin.core.namespace import Application, Namespace
from readmin.core.registry import ControllerRegistry
from readmin.core.resource import Resource, RouteName

__all__ = [
    "Application",
    "Namespace",
    "Resource",
    "RouteName",
    "ControllerAction",
    "ControllerRegistry",
    "AdminController",
    "ResourceController",
    "DashboardController",
]
