# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Setter specifications for widget classes."""

from __future__ import annotations

import re
from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..node import WidgetNode


# Pattern for setter with optional flag marker and attribute name: name, name!, name=attr, name!=attr
_SETTER_PATTERN = re.compile(
    r'^([a-zA-Z_][a-zA-Z0-9_]*)\s*(!)?\s*(?:=\s*([a-zA-Z_][a-zA-Z0-9_]*))?$'
)


def camel_case(name: str) -> str:
    """Convert a snake_case setter name to the host's camelCase.

    Examples:
        >>> camel_case('line_limit')
        'lineLimit'
        >>> camel_case('text')
        'text'
    """
    head, *rest = name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


def parse_setter_spec(spec: str) -> tuple[str, str, bool]:
    """Parse a single setter specification.

    Args:
        spec: Setter spec like 'text', 'bold!', 'widget_url=widgetURL'.

    Returns:
        Tuple of (setter_name, attribute_name, is_flag)

    Raises:
        ValueError: If spec format is invalid.

    Examples:
        >>> parse_setter_spec('line_limit')
        ('line_limit', 'lineLimit', False)
        >>> parse_setter_spec('bold!')
        ('bold', 'bold', True)
        >>> parse_setter_spec('widget_url=widgetURL')
        ('widget_url', 'widgetURL', False)
    """
    match = _SETTER_PATTERN.match(spec.strip())
    if not match:
        raise ValueError(f"Invalid setter specification: '{spec}'")

    name, flag, attribute = match.groups()
    return name, attribute or camel_case(name), flag is not None


def parse_setters(specs: str) -> dict[str, tuple[str, bool]]:
    """Parse a comma-separated list of setter specifications.

    Returns:
        Dict mapping setter_name -> (attribute_name, is_flag).
        Empty entries are ignored.
    """
    parsed: dict[str, tuple[str, bool]] = {}
    for spec in specs.split(','):
        if not spec.strip():
            continue
        name, attribute, is_flag = parse_setter_spec(spec)
        parsed[name] = (attribute, is_flag)
    return parsed


def make_setter(name: str, attribute: str, is_flag: bool = False) -> Callable[..., WidgetNode]:
    """Build a chainable setter method storing a single attribute.

    Flag setters default their value to True, so ``node.bold()``
    stores ``bold: True``.
    """
    if is_flag:
        def flag_setter(self: WidgetNode, value: bool = True) -> WidgetNode:
            return self.set_attr(attribute, value)

        flag_setter.__name__ = name
        flag_setter.__doc__ = f"Set the '{attribute}' flag (default True)."
        return flag_setter

    def setter(self: WidgetNode, value: Any) -> WidgetNode:
        return self.set_attr(attribute, value)

    setter.__name__ = name
    setter.__doc__ = f"Set the '{attribute}' attribute."
    return setter
