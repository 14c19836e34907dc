# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Widget builder exceptions."""

from __future__ import annotations


class WidgetError(Exception):
    """Base exception for widget builder errors."""

    pass


class UnknownKindError(WidgetError, KeyError):
    """Raised when a widget kind is not registered in the catalog."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0]) if self.args else ''


class UnknownSetterError(WidgetError, AttributeError):
    """Raised when a widget has no setter with the requested name."""

    pass
