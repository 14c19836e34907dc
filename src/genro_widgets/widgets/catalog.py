# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Widget catalog - declarative table of widget kinds.

Each kind is described by a dict with:
    - setters: comma-separated setter specs (see setters.parse_setter_spec)
    - ordered: default attribute encoding for the kind

Classes are generated from the table instead of being written by hand.
New kinds can be added at runtime with register_kind().

Example:
    >>> from genro_widgets.widgets import Hstack, Text, create
    >>> row = Hstack().spacing(8).set_views([
    ...     Text().text('Hello').bold(),
    ...     create('spacer'),
    ... ])
    >>> row.definition['views'][0]
    {'type': 'text', 'props': {'text': 'Hello', 'bold': True}}
"""

from __future__ import annotations

import logging
from typing import Any

from ..exceptions import UnknownKindError
from .base import Widget

logger = logging.getLogger(__name__)


_CATALOG: dict[str, dict[str, Any]] = {
    'text': dict(
        setters='text, date, style, start_date, end_date, bold!, font, '
                'line_limit, minimum_scale_factor',
    ),
    'image': dict(
        setters='image, symbol, path, uri, resizable!, scaled_to_fill!, '
                'scaled_to_fit!, accessibility_hidden!, accessibility_label, '
                'accessibility_hint',
    ),
    'color': dict(setters='color, light, dark'),
    'gradient': dict(setters='start_point, end_point, locations, colors'),
    'hstack': dict(setters='alignment, spacing'),
    'vstack': dict(setters='alignment, spacing'),
    'zstack': dict(setters='alignment'),
    'spacer': dict(setters='min_length'),
    'divider': dict(),
    'hgrid': dict(setters='rows, spacing, alignment'),
    'vgrid': dict(setters='columns, spacing, alignment'),
}

# Cache for generated classes
_classes: dict[str, type[Widget]] = {}


def _class_name(kind: str) -> str:
    return ''.join(part.capitalize() for part in kind.replace('-', '_').split('_'))


def _build_class(kind: str, config: dict[str, Any]) -> type[Widget]:
    """Generate the Widget subclass for a catalog entry."""
    namespace = {
        '__slots__': (),
        '__module__': __name__,
        '__doc__': f"Widget of kind '{kind}'.",
        'default_kind': kind,
        'default_ordered': bool(config.get('ordered', False)),
        'setters': config.get('setters', ''),
    }
    cls = type(_class_name(kind), (Widget,), namespace)
    logger.debug("Generated %s for kind %r", cls.__name__, kind)
    return cls


def register_kind(kind: str, setters: str = '', ordered: bool = False) -> type[Widget]:
    """Add a kind to the catalog and return its widget class.

    Registering an existing kind replaces its entry.

    Args:
        kind: The widget type tag emitted as 'type'.
        setters: Comma-separated setter specs for kind-specific setters.
        ordered: If True, instances serialize attributes as 'modifiers'
            unless overridden at construction.

    Raises:
        ValueError: If a setter spec is malformed.

    Example:
        >>> Effect = register_kind('effect', setters='saturation, hue_rotation', ordered=True)
        >>> Effect().opacity(0.5).blur(3).definition
        {'type': 'effect', 'modifiers': [{'opacity': 0.5}, {'blur': 3}]}
    """
    config = dict(setters=setters, ordered=ordered)
    cls = _build_class(kind, config)
    _CATALOG[kind] = config
    _classes[kind] = cls
    logger.debug("Registered widget kind %r (ordered=%s)", kind, ordered)
    return cls


def widget_class(kind: str) -> type[Widget]:
    """Get the widget class for a kind.

    Raises:
        UnknownKindError: If the kind is not in the catalog.
    """
    cls = _classes.get(kind)
    if cls is not None:
        return cls

    config = _CATALOG.get(kind)
    if config is None:
        raise UnknownKindError(
            f"Unknown widget kind '{kind}'. Known kinds: {', '.join(kinds())}"
        )
    cls = _classes[kind] = _build_class(kind, config)
    return cls


def create(kind: str, ordered: bool | None = None) -> Widget:
    """Create an empty widget of the given kind.

    Args:
        kind: A registered widget kind.
        ordered: Override the kind's default encoding.

    Raises:
        UnknownKindError: If the kind is not in the catalog.
    """
    return widget_class(kind)(ordered=ordered)


def kinds() -> list[str]:
    """Get all registered kinds."""
    return list(_CATALOG)


Text = widget_class('text')
Image = widget_class('image')
Color = widget_class('color')
Gradient = widget_class('gradient')
Hstack = widget_class('hstack')
Vstack = widget_class('vstack')
Zstack = widget_class('zstack')
Spacer = widget_class('spacer')
Divider = widget_class('divider')
Hgrid = widget_class('hgrid')
Vgrid = widget_class('vgrid')
