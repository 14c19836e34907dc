# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Widgets - Fluent builder for declarative widget trees.

A lightweight, zero-dependency library that builds widget nodes with
chainable setters and serializes them to plain nested definitions
for a host renderer.
"""

__version__ = "0.1.0"

from .exceptions import UnknownKindError, UnknownSetterError, WidgetError
from .node import WidgetNode
from .widgets import (
    Color,
    Divider,
    Gradient,
    Hgrid,
    Hstack,
    Image,
    Spacer,
    Text,
    Vgrid,
    Vstack,
    Widget,
    Zstack,
    create,
    kinds,
    register_kind,
    widget_class,
)

__all__ = [
    # Core classes
    "WidgetNode",
    "Widget",
    # Catalog
    "create",
    "kinds",
    "register_kind",
    "widget_class",
    "Text",
    "Image",
    "Color",
    "Gradient",
    "Hstack",
    "Vstack",
    "Zstack",
    "Spacer",
    "Divider",
    "Hgrid",
    "Vgrid",
    # Exceptions
    "WidgetError",
    "UnknownKindError",
    "UnknownSetterError",
]
