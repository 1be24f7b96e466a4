"""Entry-point for the compose → tab resolution pipeline."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional

from text_composer.composer.composer import Composer, Separator
from text_composer.composer.measurement import Measurer
from text_composer.composer.tab_resolver import TabResolver
from text_composer.model.buffer import ComposedBuffer
from text_composer.model.style import Style
from text_composer.model.style_model import StylesCatalog
from text_composer.utils.debug import DebugDumper
from text_composer.utils.logger import get_logger

LOGGER = get_logger(__name__)


def compose_text(
    fragments: Iterable[Any],
    base_style: Optional[Style] = None,
    *,
    separator: Optional[Separator] = None,
    styles: Optional[StylesCatalog] = None,
    measurer: Optional[Measurer] = None,
    debug_dir: Optional[Path] = None,
) -> ComposedBuffer:
    """Compose fragments over ``base_style`` and resolve their tab markers.

    ``measurer`` defaults to the approximate font-size based estimator. When
    ``debug_dir`` is given the resolved buffer is also written there as JSON.
    """
    buffer = Composer(styles).compose(fragments, base_style, separator=separator)
    TabResolver(measurer).resolve(buffer)

    if debug_dir is not None:
        path = DebugDumper(Path(debug_dir)).dump(buffer)
        LOGGER.info("Wrote composed buffer to %s", path)
    return buffer
