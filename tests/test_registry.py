"""
Unit tests for the controller registry
"""

import logging

import pytest

from readmin.core.base import AdminController, ResourceController
from readmin.exceptions import ControllerNotFoundError


def test_resolve_registered_controller(registry):
    """Test resolve returns the registered class"""
    class PostsController(ResourceController):
        pass

    registry.register("Admin.PostsController", PostsController)
    assert registry.resolve("Admin.PostsController") is PostsController
    assert "Admin.PostsController" in registry


def test_resolve_missing_controller(registry):
    """Test resolve raises for unknown names"""
    with pytest.raises(ControllerNotFoundError, match="Controller not found: Admin.GhostsController"):
        registry.resolve("Admin.GhostsController")


def test_lookup_missing_controller(registry):
    """Test lookup returns None for unknown names"""
    assert registry.lookup("Admin.GhostsController") is None


def test_define_controller(registry):
    """Test define_controller builds a named subclass with attributes"""
    config = {"self": {"route_prefix": "admin", "route_collection_name": "posts"}}
    controller = registry.define_controller(
        "Admin.PostsController", ResourceController, resources_configuration=config
    )

    assert controller.__name__ == "PostsController"
    assert controller.__qualname__ == "Admin.PostsController"
    assert controller.route_prefix() == "admin"
    assert controller.route_collection_name() == "posts"
    assert registry.resolve("Admin.PostsController") is controller


def test_base_controller_configuration():
    """Test the base controller has an empty route configuration"""
    assert AdminController.route_prefix() is None
    assert AdminController.route_collection_name() is None
    assert ResourceController.actions() == ResourceController.default_actions


def test_replacing_controller_logs_warning(registry, caplog):
    """Test re-registering a name with another class is logged"""
    registry.define_controller("PostsController", ResourceController)

    with caplog.at_level(logging.WARNING, logger="readmin.core.registry"):
        replacement = registry.define_controller("PostsController", ResourceController)

    assert registry.resolve("PostsController") is replacement
    assert "Replacing registered controller: PostsController" in caplog.text


def test_route_table(registry):
    """Test route helper names map to paths"""
    registry.add_route("admin_posts_path", "/admin/posts")

    assert registry.path_for("admin_posts_path") == "/admin/posts"
    assert dict(registry.routes) == {"admin_posts_path": "/admin/posts"}
    with pytest.raises(TypeError):
        registry.routes["other_path"] = "/other"


def test_unknown_route(registry):
    """Test unknown route helpers raise KeyError"""
    with pytest.raises(KeyError, match="Route not found"):
        registry.path_for("admin_ghosts_path")


def test_clear(registry):
    """Test clear empties controllers and routes"""
    registry.define_controller("PostsController", ResourceController)
    registry.add_route("posts_path", "/posts")
    registry.clear()

    assert len(registry) == 0
    assert registry.names() == []
    assert dict(registry.routes) == {}
