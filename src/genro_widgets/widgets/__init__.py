# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Widgets - base class and the catalog of widget kinds."""

from .base import Widget
from .catalog import (
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
    Zstack,
    create,
    kinds,
    register_kind,
    widget_class,
)
from .setters import camel_case, parse_setter_spec, parse_setters

__all__ = [
    'Widget',
    # Catalog
    'create',
    'kinds',
    'register_kind',
    'widget_class',
    # Kinds
    'Text',
    'Image',
    'Color',
    'Gradient',
    'Hstack',
    'Vstack',
    'Zstack',
    'Spacer',
    'Divider',
    'Hgrid',
    'Vgrid',
    # Setter specs
    'camel_case',
    'parse_setter_spec',
    'parse_setters',
]
