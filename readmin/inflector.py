"""
READMIN Inflector

English noun and casing transformations used to derive admin names.

The heavy lifting is done by the ``inflection`` package. On top of it an
Inflector keeps its own irregular, uncountable and acronym tables so that an
application can teach READMIN words like "person/staff" or "API" without
touching the process-wide tables of the library.

Usage:
    from readmin.inflector import Inflector

    inflector = Inflector()
    inflector.irregular("cactus", "cacti")
    inflector.acronym("API")

    inflector.pluralize("Cactus")     # "Cacti"
    inflector.camelize("api_key")     # "APIKey"
"""

import re
from typing import Dict, Iterable, Optional, Tuple

import inflection

_LAST_WORD = re.compile(r"^(.*[\s_])?([^\s_]+)$")


def _match_case(template: str, word: str) -> str:
    """Copy the capitalisation of ``template`` onto ``word``."""
    if len(template) > 1 and template.isupper():
        return word.upper()
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


class Inflector:
    """
    Inflection rules for one application.

    Custom tables are consulted first, against the end of the last word of
    the input: "Category Page" -> "Page", "DesertCactus" -> "Cactus".
    Everything else is delegated to ``inflection``.
    """

    def __init__(
        self,
        irregulars: Optional[Dict[str, str]] = None,
        uncountables: Optional[Iterable[str]] = None,
        acronyms: Optional[Iterable[str]] = None
    ):
        self._plurals: Dict[str, str] = {}
        self._singulars: Dict[str, str] = {}
        self._uncountables = set()
        self._acronyms: Dict[str, str] = {}

        for singular, plural in (irregulars or {}).items():
            self.irregular(singular, plural)
        self.uncountable(*(uncountables or ()))
        for word in acronyms or ():
            self.acronym(word)

    # Rule tables
    # ============================

    def irregular(self, singular: str, plural: str) -> None:
        """Register an irregular singular/plural pair."""
        self._plurals[singular.lower()] = plural.lower()
        self._singulars[plural.lower()] = singular.lower()

    def uncountable(self, *words: str) -> None:
        """Register words that have no distinct plural form."""
        self._uncountables.update(word.lower() for word in words)

    def acronym(self, word: str) -> None:
        """Register an acronym that keeps its casing when camelized or titleized."""
        self._acronyms[word.lower()] = word

    # Transformations
    # ============================

    def pluralize(self, word: str) -> str:
        head, last = self._split_last(word)
        if last is None:
            return inflection.pluralize(word)

        if self._match_suffix(last, self._uncountables) or self._match_suffix(last, self._singulars):
            return word
        match = self._match_suffix(last, self._plurals)
        if match is not None:
            prefix, tail, key = match
            return head + prefix + _match_case(tail, self._plurals[key])
        return inflection.pluralize(word)

    def singularize(self, word: str) -> str:
        head, last = self._split_last(word)
        if last is None:
            return inflection.singularize(word)

        if self._match_suffix(last, self._uncountables) or self._match_suffix(last, self._plurals):
            return word
        match = self._match_suffix(last, self._singulars)
        if match is not None:
            prefix, tail, key = match
            return head + prefix + _match_case(tail, self._singulars[key])
        return inflection.singularize(word)

    def underscore(self, word: str) -> str:
        return inflection.underscore(word)

    def camelize(self, word: str) -> str:
        """
        Camel-case an underscored word.

        Registered acronyms are emitted verbatim: "api_key" -> "APIKey".
        """
        if not self._acronyms:
            return inflection.camelize(word)
        return "".join(
            self._acronyms.get(part.lower()) or inflection.camelize(part)
            for part in word.split("_")
        )

    def titleize(self, word: str) -> str:
        """Human readable, title-cased form: "blog_post" -> "Blog Post"."""
        title = inflection.titleize(word)
        if not self._acronyms:
            return title
        return " ".join(self._acronyms.get(part.lower(), part) for part in title.split(" "))

    def _match_suffix(self, word: str, table: Iterable[str]) -> Optional[Tuple[str, str, str]]:
        """
        Find the longest table entry ending ``word``.

        An entry matches the whole word or its last CamelCase segment(s):
        "cactus" matches "Cactus" and "DesertCactus" but not "Xcactus".

        Returns:
            (prefix, matched tail, table key), or None
        """
        lowered = word.lower()
        for key in sorted(table, key=len, reverse=True):
            if lowered == key:
                return "", word, key
            start = len(word) - len(key)
            if start > 0 and lowered.endswith(key) and word[start].isupper():
                return word[:start], word[start:], key
        return None

    def _split_last(self, word: str) -> Tuple[str, Optional[str]]:
        match = _LAST_WORD.match(word or "")
        if match is None:
            return word, None
        return match.group(1) or "", match.group(2)


# Inflector used when a Resource is not given one explicitly
default_inflector = Inflector()


__all__ = ["Inflector", "default_inflector"]
