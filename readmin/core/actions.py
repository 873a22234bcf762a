"""
Controller Actions

Custom member and collection actions registered on a resource.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from readmin.config import Config
from readmin.exceptions import InvalidActionError


@dataclass
class ControllerAction:
    """
    A custom action added to a resource controller.

    Member actions act on one record (``/admin/posts/1/publish``),
    collection actions on the whole collection (``/admin/posts/export``).
    """

    name: str
    http_verb: str = "get"
    options: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.http_verb = self.http_verb.lower()
        if self.http_verb not in Config.Internal.SUPPORTED_HTTP_METHODS:
            raise InvalidActionError(
                f"Unsupported HTTP verb '{self.http_verb}' for action '{self.name}'. "
                f"Must be one of: {', '.join(Config.Internal.SUPPORTED_HTTP_METHODS)}"
            )
