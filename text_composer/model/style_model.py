"""Named styles that fragments can reference by name."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from text_composer.model.style import Style


@dataclass(slots=True)
class StyleDefinition:
    """A named style, optionally layered over a parent style."""

    name: str
    style: Style
    based_on: Optional[str] = None
    is_default: bool = False


class StylesCatalog:
    """Collection of resolved styles keyed by name."""

    def __init__(self, styles: Mapping[str, StyleDefinition]):
        self._styles = dict(styles)

    def get(self, name: Optional[str]) -> Optional[StyleDefinition]:
        """Return the resolved style definition given its name."""
        if name is None:
            return None
        return self._styles.get(name)

    def style_for(self, name: str) -> Style:
        """Return the style registered under ``name``; unknown names raise KeyError."""
        definition = self._styles.get(name)
        if definition is None:
            raise KeyError(f"Unknown style: {name!r}")
        return definition.style

    def all(self) -> Dict[str, StyleDefinition]:
        """Return a copy of the resolved styles."""
        return dict(self._styles)

    def default(self) -> Optional[StyleDefinition]:
        """Return the style flagged as default, if any."""
        for definition in self._styles.values():
            if definition.is_default:
                return definition
        return None

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __len__(self) -> int:
        return len(self._styles)
