"""Marker-based template injection.

Three marker kinds, each expanded by its own pass over the whole string:

    {{NAME}}                                        scalar variable
    <!-- REPEAT: items --> ... <!-- END REPEAT: items -->   one block per item
    <!-- IF: flag --> ... <!-- ENDIF: flag -->              kept iff flag is true

Passes run strictly in order: variables, repeat zones, conditional zones,
cleanup, environment markers. Every injected value is HTML-escaped; there
is no raw form. Nothing here evaluates expressions.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any, ClassVar

from souverain.logging.logger import Log

RenderFlags = Mapping[str, bool]


class TemplateInjector:
    """Deterministic renderer: same template, data and flags give the same output."""

    ENVIRONMENT_MARKERS: ClassVar[frozenset[str]] = frozenset({"CURRENT_YEAR"})

    _VARIABLE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\{\{([A-Za-z][A-Za-z0-9_]*)\}\}")
    _REPEAT_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"<!-- REPEAT: ([\w-]+) -->(.*?)<!-- END REPEAT: \1 -->",
        re.DOTALL,
    )
    _IF_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"<!-- IF: ([\w-]+) -->(.*?)<!-- ENDIF: \1 -->",
        re.DOTALL,
    )
    _EMPTY_WRAPPER_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"<(section|ul|ol)\b[^>]*>\s*</\1>",
        re.IGNORECASE,
    )
    _BLANK_LINES_RE: ClassVar[re.Pattern[str]] = re.compile(r"\n(?:[ \t]*\n){3,}")

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    def render(
        self,
        template: str,
        data: Mapping[str, Any],
        flags: RenderFlags,
    ) -> str:
        """Render *template* with *data* and *flags*. Never raises on missing data."""
        output = self._substitute_variables(template, data)
        output = self._expand_repeat_zones(output, data)
        output = self._resolve_conditional_zones(output, flags)
        output = self._cleanup(output)
        output = self._substitute_environment(output)
        Log.debug(f"Rendered template: {len(template)} -> {len(output)} chars")
        return output

    # ------------------------------------------------------------------
    # Stage 1: scalar variables (outside repeat zones)
    # ------------------------------------------------------------------

    def _substitute_variables(self, template: str, data: Mapping[str, Any]) -> str:
        parts: list[str] = []
        cursor = 0
        for zone in self._REPEAT_RE.finditer(template):
            parts.append(self._fill(template[cursor:zone.start()], data))
            parts.append(zone.group(0))
            cursor = zone.end()
        parts.append(self._fill(template[cursor:], data))
        return "".join(parts)

    def _fill(self, text: str, scope: Mapping[str, Any]) -> str:
        def replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in self.ENVIRONMENT_MARKERS:
                return match.group(0)
            return escape_html(_to_scalar(lookup(scope, name)))

        return self._VARIABLE_RE.sub(replace, text)

    # ------------------------------------------------------------------
    # Stage 2: repeat zones
    # ------------------------------------------------------------------

    def _expand_repeat_zones(self, text: str, data: Mapping[str, Any]) -> str:
        def expand(zone: re.Match[str]) -> str:
            items = lookup(data, zone.group(1))
            if not isinstance(items, list) or not items:
                return ""
            block = zone.group(2)
            return "\n".join(self._fill(block, _item_scope(item)) for item in items)

        return self._REPEAT_RE.sub(expand, text)

    # ------------------------------------------------------------------
    # Stage 3: conditional zones
    # ------------------------------------------------------------------

    def _resolve_conditional_zones(self, text: str, flags: RenderFlags) -> str:
        def resolve(zone: re.Match[str]) -> str:
            return zone.group(2) if bool(flags.get(zone.group(1), False)) else ""

        # Nested zones with different names need another pass once the outer is gone.
        while True:
            updated = self._IF_RE.sub(resolve, text)
            if updated == text:
                return updated
            text = updated

    # ------------------------------------------------------------------
    # Stage 4: cosmetic cleanup
    # ------------------------------------------------------------------

    def _cleanup(self, text: str) -> str:
        # Removing an empty list can leave its enclosing section empty.
        while True:
            updated = self._EMPTY_WRAPPER_RE.sub("", text)
            if updated == text:
                break
            text = updated
        return self._BLANK_LINES_RE.sub("\n\n", text)

    # ------------------------------------------------------------------
    # Stage 5: environment markers, after all data-driven substitution
    # ------------------------------------------------------------------

    def _substitute_environment(self, text: str) -> str:
        environment = {"CURRENT_YEAR": str(self._today().year)}

        def replace(match: re.Match[str]) -> str:
            return environment.get(match.group(1), match.group(0))

        return self._VARIABLE_RE.sub(replace, text)


def escape_html(value: str) -> str:
    """Escape ``& < > " '`` for safe inclusion in markup or attributes."""
    return html.escape(value, quote=True)


def marker_name(key: str) -> str:
    """UPPER_SNAKE form of a data key: ``heroTitle`` -> ``HERO_TITLE``."""
    snake = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", key)
    return snake.replace("-", "_").upper()


def lookup(scope: Mapping[str, Any], name: str) -> Any:
    """Resolve a marker name against a data mapping, ``None`` when absent."""
    if name in scope:
        return scope[name]
    for key, value in scope.items():
        if marker_name(key) == name:
            return value
    return None


def _item_scope(item: Any) -> Mapping[str, Any]:
    if isinstance(item, Mapping):
        return item
    return {"VALUE": item}


def _to_scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return ""
