# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Widget - base class for catalog widgets with declarative setters."""

from __future__ import annotations

from typing import Any, Callable

from ..exceptions import UnknownSetterError
from ..node import WidgetNode
from .setters import make_setter, parse_setters


class Widget(WidgetNode):
    """Base class for widgets with chainable attribute setters.

    Simple setters are declared in the ``setters`` class attribute as a
    comma-separated spec string (see setters.parse_setter_spec):

        class Text(Widget):
            default_kind = 'text'
            setters = 'text, bold!, line_limit'

    The class automatically builds a _setters dict mapping both the
    Python name and the host attribute name to a setter function via
    __init_subclass__. Setters of parent classes are inherited.
    Setters that pack several arguments into one attribute (frame,
    border, clipped) are plain methods.

    Usage:
        >>> Text().text('hi').bold().line_limit(2).definition
        {'type': 'text', 'props': {'text': 'hi', 'bold': True, 'lineLimit': 2}}
    """

    __slots__ = ()

    # Setters shared by every widget kind
    setters: str = (
        'position, offset, padding, layout_priority, corner_radius, '
        'opacity, blur, color, background, link, widget_url=widgetURL'
    )

    # Class-level dict mapping setter name -> setter function
    _setters: dict[str, Callable[..., WidgetNode]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Build the _setters dict from the ``setters`` spec string."""
        super().__init_subclass__(**kwargs)
        cls._register_setters()

    @classmethod
    def _register_setters(cls) -> None:
        # Start with parent's setters if any
        cls._setters = {}
        for base in cls.__mro__[1:]:
            if '_setters' in base.__dict__:
                cls._setters.update(base._setters)
                break

        specs = cls.__dict__.get('setters')
        if not specs:
            return

        for name, (attribute, is_flag) in parse_setters(specs).items():
            # __getattr__ only sees public names missing from the class
            if name.startswith('_') or getattr(cls, name, None) is not None:
                raise ValueError(
                    f"Setter '{name}' on '{cls.__name__}' is a private name "
                    "or clashes with an existing attribute"
                )
            setter = make_setter(name, attribute, is_flag)
            cls._setters[name] = setter
            if not attribute.startswith('_') and getattr(cls, attribute, None) is None:
                cls._setters.setdefault(attribute, setter)

    def __getattr__(self, name: str) -> Any:
        """Look up name in _setters and return the bound setter."""
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        setter = type(self)._setters.get(name)
        if setter is not None:
            return setter.__get__(self, type(self))

        raise UnknownSetterError(
            f"'{type(self).__name__}' ({self.kind}) has no setter '{name}'"
        )

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(type(self)._setters))

    @classmethod
    def setter_names(cls) -> list[str]:
        """Get all setter names available on this class."""
        return list(cls._setters)

    # ==================== Compound setters ====================

    def frame(
        self,
        width: Any = None,
        height: Any = None,
        alignment: Any = None,
        min_width: Any = None,
        ideal_width: Any = None,
        max_width: Any = None,
        min_height: Any = None,
        ideal_height: Any = None,
        max_height: Any = None,
    ) -> Widget:
        """Set the frame, packing the geometry into one 'frame' attribute.

        Use either width/height or the min/ideal/max variants. Pass
        max_width=float('inf') to fill the parent. Arguments left to
        None are not emitted.

        Example:
            >>> Text().frame(max_width=float('inf'), alignment=1).props
            {'frame': {'alignment': 1, 'maxWidth': inf}}
        """
        geometry = {
            'width': width,
            'height': height,
            'alignment': alignment,
            'minWidth': min_width,
            'idealWidth': ideal_width,
            'maxWidth': max_width,
            'minHeight': min_height,
            'idealHeight': ideal_height,
            'maxHeight': max_height,
        }
        self.set_attr('frame', {k: v for k, v in geometry.items() if v is not None})
        return self

    def border(self, color: Any, width: Any) -> Widget:
        """Set a border from a host color and a line width."""
        self.set_attr('border', {'color': color, 'width': width})
        return self

    def clipped(self, flag: bool = True, antialiased: bool = False) -> Widget:
        """Clip content outside the bounds.

        With antialiased=True the attribute becomes {'antialiased': True}.
        """
        self.set_attr('clipped', {'antialiased': True} if antialiased else flag)
        return self


Widget._register_setters()
