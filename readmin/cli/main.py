"""
READMIN CLI Commands

Inspect the names READMIN derives for a model and generate admin
registration files.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
import questionary
from questionary import Style

from readmin.cli._template_loader import jinja_env
from readmin.config import Config
from readmin.core.namespace import Application
from readmin.core.registry import ControllerRegistry
from readmin.core.resource import Resource
from readmin.logging import configure_logging

# Custom style for questionary prompts
custom_style = Style([
    ('qmark', 'fg:#673ab7 bold'),
    ('question', 'bold'),
    ('answer', 'fg:#2196f3 bold'),
    ('pointer', 'fg:#673ab7 bold'),
    ('instruction', ''),
    ('text', ''),
])


def _version_callback(ctx, param, value):
    """Display version and exit."""
    if value:
        from readmin import __version__
        click.echo(f'READMIN CLI v{__version__}')
        ctx.exit()


def _header(title: str) -> None:
    click.secho("\n" + "=" * 50, fg='cyan', bold=True)
    click.secho(title, fg='cyan', bold=True)
    click.secho("=" * 50 + "\n", fg='cyan', bold=True)


def split_model_path(model: str) -> Tuple[Optional[str], str]:
    """
    Split "package.module:Class" into module and class path.

    Examples:
        split_model_path("blog.models:Post")   # ("blog.models", "Post")
        split_model_path("Post")               # (None, "Post")
    """
    module, sep, class_path = model.rpartition(":")
    if not sep:
        return None, model
    return module or None, class_path


def _register(model: str, namespace: Optional[str], root: bool, as_: Optional[str]) -> Resource:
    """Register ``model`` in a throwaway application to compute its names."""
    if root and namespace:
        raise click.UsageError("--root and --namespace cannot be used together")

    options = {}
    if root:
        options["namespace"] = None
    elif namespace:
        options["namespace"] = namespace
    if as_:
        options["as_"] = as_

    _, class_path = split_model_path(model)
    site = Application(config=Config, registry=ControllerRegistry())
    return site.register(class_path, **options)


namespace_option = click.option('--namespace', default=None,
                                help=f'Admin namespace (default: {Config.DEFAULT_NAMESPACE})')
root_option = click.option('--root', is_flag=True, default=False,
                           help='Register in the root namespace (no prefix)')
as_option = click.option('--as', 'as_', default=None,
                         help='Custom resource name (e.g. "Category Page")')


@click.group()
@click.option('--version', '-V', is_flag=True, callback=_version_callback, expose_value=False,
              is_eager=True, help='Show version and exit')
def cli():
    """
    READMIN CLI - Admin resource registration

    Inspect derived admin names and generate registration files.
    """
    configure_logging(Config)


@cli.command()
@click.argument('model')
@namespace_option
@root_option
@as_option
def names(model, namespace, root, as_):
    """
    Show the names derived for MODEL.

    Examples:
        readmin names Post
        readmin names blog.models:Post --namespace backoffice
        readmin names Page --as "Category Pages" --root
    """
    resource = _register(model, namespace, root, as_)
    route_name = resource.route_collection_path

    rows = [
        ("Underscored name", resource.underscored_resource_name),
        ("Resource name", resource.resource_name),
        ("Plural resource name", resource.plural_resource_name),
        ("Controller", resource.controller_name),
        ("Dashboard controller", resource.dashboard_controller_name),
        ("Menu", resource.menu_name),
        ("Menu item", resource.menu_item_name),
        ("Collection route", f"{route_name} -> {resource.controller_registry.path_for(route_name)}"),
    ]
    for label, value in rows:
        click.secho(f"{label + ':':<24}", fg='blue', nl=False)
        click.secho(str(value), fg='green', bold=True)


@cli.group()
def generate():
    """
    Generate code for the admin layer.

    Available generators:
    - resource: Generate a registration file for a model
    """


@generate.command(name='resource')
@click.argument('model')
@namespace_option
@root_option
@as_option
@click.option('--parent', default=None, help='Parent menu item')
@click.option('--dry-run', is_flag=True, default=False, help='Preview changes without creating files')
@click.option('--force', is_flag=True, default=False, help='Overwrite an existing file without asking')
def generate_resource(model, namespace, root, as_, parent, dry_run, force):
    """
    Generate an admin registration file for MODEL.

    MODEL is a class name or "package.module:Class".

    Examples:
        readmin generate resource blog.models:Post
        readmin generate resource blog.models:Page --as "Category Page" --parent Blog
    """
    _header("Generating Admin Resource")

    module, class_path = split_model_path(model)
    resource = _register(model, namespace, root, as_)
    route_name = resource.route_collection_path
    variable = resource.controller.route_collection_name()

    options = []
    if root or namespace:
        options.append(("namespace", repr(resource.namespace)))
    if as_:
        options.append(("as_", repr(as_)))

    content = jinja_env.get_template("resource.py.j2").render(
        module=module,
        import_name=class_path.split(".")[0],
        model_ref=class_path if module else repr(class_path),
        variable=variable,
        options=options,
        parent=repr(parent) if parent else None,
        plural_resource_name=resource.plural_resource_name,
        controller_name=resource.controller_name,
        route_name=route_name,
        route_path=resource.controller_registry.path_for(route_name),
    )

    admin_dir = Path.cwd() / Config.ADMIN_DIR
    target = admin_dir / f"{variable}.py"

    if dry_run:
        click.secho(f"[DRY RUN] Would create: {target}\n", fg='yellow', bold=True)
        click.echo(content)
        return

    if target.exists() and not force:
        overwrite = questionary.confirm(
            f"{target.name} already exists. Overwrite?",
            default=False,
            style=custom_style
        ).ask()
        if not overwrite:
            click.secho("[CANCELLED] Existing file kept.", fg='yellow', bold=True)
            sys.exit(1)

    admin_dir.mkdir(parents=True, exist_ok=True)
    init_file = admin_dir / "__init__.py"
    if not init_file.exists():
        init_file.write_text("", encoding="utf-8")

    target.write_text(content, encoding="utf-8")
    click.secho(f"[OK] Created {target.relative_to(Path.cwd())}", fg='green', bold=True)
    click.secho(f"     {resource.controller_name} ({route_name})", fg='green')


if __name__ == '__main__':
    cli()
