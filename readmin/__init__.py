"""
READMIN - Admin resource registration for Python web backends

Registers model classes and derives the conventional names an admin
interface needs: controller classes, route helpers, menu labels.

Minimal Quick Start:
    from readmin import register

    posts = register(Post)
    posts.controller_name          # "Admin.PostsController"
    posts.route_collection_path    # "admin_posts_path"
    posts.menu(parent="Blog")

Custom defaults:
    from readmin import Application, Config

    class AppConfig(Config):
        DEFAULT_NAMESPACE = "backoffice"

    site = Application(config=AppConfig)
    site.register(Post, as_="Article", sort_order="published_at_desc")

Full Import Guide:
    # Core
    from readmin import Resource, Application, Config, register

    # Inflection rules
    from readmin.inflector import Inflector

    # Logging
    from readmin.logging import configure_logging, get_logger
"""

__version__ = "0.1.0"


from readmin.config import Config, DevConfig, ProdConfig
from readmin.core.namespace import Application, Namespace, application, register
from readmin.core.registry import ControllerRegistry, controllers
from readmin.core.resource import Resource
from readmin.exceptions import ControllerNotFoundError, InvalidActionError, ReadminError
from readmin.inflector import Inflector

__all__ = [
    # Core
    "Resource",
    "Application",
    "Namespace",
    "application",
    "register",
    "ControllerRegistry",
    "controllers",
    "Inflector",
    # Config
    "Config",
    "DevConfig",
    "ProdConfig",
    # Errors
    "ReadminError",
    "ControllerNotFoundError",
    "InvalidActionError",
    # Version
    "__version__",
]
