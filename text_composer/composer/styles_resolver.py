"""Flatten named style definitions along their ``based_on`` chains."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from text_composer.model.style import merge
from text_composer.model.style_model import StyleDefinition, StylesCatalog
from text_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)


class StylesResolver:
    """Resolve style inheritance into a catalog of fully merged styles."""

    def __init__(self, definitions: Iterable[StyleDefinition]) -> None:
        self._definitions: Dict[str, StyleDefinition] = {}
        for definition in definitions:
            if definition.name in self._definitions:
                LOGGER.warning("Style %r defined twice; keeping the last definition", definition.name)
            self._definitions[definition.name] = definition

    def resolve(self) -> StylesCatalog:
        """Return a catalog where every style already includes its ancestors."""
        resolved: Dict[str, StyleDefinition] = {}

        def resolve_one(name: str, stack: Optional[List[str]] = None) -> StyleDefinition:
            if name in resolved:
                return resolved[name]
            if stack is None:
                stack = []
            if name in stack:
                LOGGER.warning("Style inheritance cycle through %r", name)
                return self._definitions[name]
            stack.append(name)
            definition = self._definitions[name]
            style = definition.style
            parent_name = definition.based_on
            if parent_name is not None:
                if parent_name in self._definitions:
                    style = merge(resolve_one(parent_name, stack).style, style)
                else:
                    LOGGER.warning("Style %r is based on unknown style %r", name, parent_name)
            resolved_definition = StyleDefinition(
                name=definition.name,
                style=style,
                based_on=parent_name,
                is_default=definition.is_default,
            )
            resolved[name] = resolved_definition
            stack.pop()
            return resolved_definition

        for name in self._definitions:
            resolve_one(name)
        return StylesCatalog(resolved)
