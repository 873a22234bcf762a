"""
Tests for the readmin command line
"""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from readmin import __version__
from readmin.cli.main import cli, split_model_path
from readmin.config import Config


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    """Test --version prints the package version"""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert f"READMIN CLI v{__version__}" in result.output


@pytest.mark.parametrize("model,expected", [
    ("Post", (None, "Post")),
    ("blog.models:Post", ("blog.models", "Post")),
    ("blog.models:Blog.Post", ("blog.models", "Blog.Post")),
])
def test_split_model_path(model, expected):
    """Test module/class splitting of model references"""
    assert split_model_path(model) == expected


def test_names(runner):
    """Test names prints the derived names"""
    result = runner.invoke(cli, ["names", "blog.models:Post"])

    assert result.exit_code == 0, result.output
    assert "Admin.PostsController" in result.output
    assert "Admin.DashboardController" in result.output
    assert "admin_posts_path -> /admin/posts" in result.output


def test_names_root_with_custom_name(runner):
    """Test names honours --root and --as"""
    result = runner.invoke(cli, ["names", "Page", "--as", "Category Pages", "--root"])

    assert result.exit_code == 0, result.output
    assert "category_page" in result.output
    assert "CategoryPagesController" in result.output
    assert "Admin." not in result.output
    assert "category_pages_path -> /category_pages" in result.output


def test_generate_resource(runner):
    """Test generate resource writes a registration file"""
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["generate", "resource", "blog.models:Post", "--parent", "Blog"])

        assert result.exit_code == 0, result.output
        content = Path("app/admin/posts.py").read_text(encoding="utf-8")
        assert Path("app/admin/__init__.py").exists()

    assert "from blog.models import Post" in content
    assert "posts = register(Post)" in content
    assert "posts.menu(parent='Blog')" in content
    assert "Route: admin_posts_path -> /admin/posts" in content


def test_generate_resource_with_options(runner):
    """Test namespace and custom name end up in the register call"""
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli, ["generate", "resource", "Page", "--namespace", "staff", "--as", "Category Page"]
        )

        assert result.exit_code == 0, result.output
        content = Path("app/admin/category_pages.py").read_text(encoding="utf-8")

    assert "category_pages = register('Page', namespace='staff', as_='Category Page')" in content
    assert "Controller: Staff.CategoryPagesController" in content
    assert ".menu(" not in content


def test_generate_dry_run(runner):
    """Test --dry-run prints the file without writing it"""
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["generate", "resource", "blog.models:Post", "--dry-run"])

        assert result.exit_code == 0, result.output
        assert "[DRY RUN]" in result.output
        assert "posts = register(Post)" in result.output
        assert not Path("app/admin").exists()


def test_generate_existing_file_cancelled(runner):
    """Test declining the overwrite prompt keeps the existing file"""
    with runner.isolated_filesystem():
        target = Path("app/admin/posts.py")
        target.parent.mkdir(parents=True)
        target.write_text("# custom\n", encoding="utf-8")

        with patch("readmin.cli.main.questionary.confirm") as confirm:
            confirm.return_value.ask.return_value = False
            result = runner.invoke(cli, ["generate", "resource", "Post"])

        assert result.exit_code == 1
        assert "[CANCELLED]" in result.output
        assert target.read_text(encoding="utf-8") == "# custom\n"


def test_generate_existing_file_forced(runner):
    """Test --force overwrites without prompting"""
    with runner.isolated_filesystem():
        target = Path("app/admin/posts.py")
        target.parent.mkdir(parents=True)
        target.write_text("# custom\n", encoding="utf-8")

        with patch("readmin.cli.main.questionary.confirm") as confirm:
            result = runner.invoke(cli, ["generate", "resource", "Post", "--force"])
            confirm.assert_not_called()

        assert result.exit_code == 0, result.output
        assert "posts = register('Post')" in target.read_text(encoding="utf-8")


def test_root_and_namespace_conflict(runner):
    """Test --root cannot be combined with --namespace"""
    result = runner.invoke(cli, ["names", "Post", "--root", "--namespace", "staff"])

    assert result.exit_code == 2
    assert "--root and --namespace cannot be used together" in result.output


def test_generate_root_and_namespace_conflict(runner):
    """Test generate resource rejects --root with --namespace before writing"""
    with runner.isolated_filesystem():
        result = runner.invoke(
            cli, ["generate", "resource", "Post", "--root", "--namespace", "staff"]
        )

        assert result.exit_code == 2
        assert not Path("app/admin").exists()


def test_cli_configures_package_logger(runner, package_logger):
    """Test the command group applies Config.LOG_LEVEL to the readmin logger"""
    with patch.object(Config, "LOG_LEVEL", "DEBUG"):
        result = runner.invoke(cli, ["names", "Post"])

    assert result.exit_code == 0, result.output
    assert package_logger.level == logging.DEBUG
    assert "Registered Post as Admin.PostsController" in result.output
