"""
Private Jinja2 Template Loader for READMIN CLI

All template settings for code generation are centralized here.
Templates render Python source, so escaping is only enabled for HTML/XML.
"""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"

jinja_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html", "xml"), default_for_string=False),
    auto_reload=False,
    undefined=StrictUndefined,  # Fail loudly on undefined variables
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)

__all__ = ['jinja_env', 'TEMPLATES_DIR']
