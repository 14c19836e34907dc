# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""WidgetNode - fluent builder and serializer for one widget."""

from __future__ import annotations

from typing import Any, Iterator


class WidgetNode:
    """A node in a declarative widget tree.

    Each node has:
    - kind: The widget type tag (e.g. 'text', 'hstack'), fixed at creation
    - ordered: Selects the attribute encoding, fixed at creation
    - attributes: Insertion-ordered dict of attribute name -> value
    - views: Ordered list of children (WidgetNode or pre-built values)

    The definition is recomputed on every call to serialize(), so it
    always reflects the current attributes and views.

    Encodings:
        - ordered=False: attributes emitted as a single 'props' dict
        - ordered=True: attributes emitted as 'modifiers', a list of
          single-key dicts in insertion order

    Example:
        >>> label = WidgetNode('text').set_attr('text', 'hi')
        >>> stack = WidgetNode('zstack').set_views([label])
        >>> stack.serialize()
        {'type': 'zstack', 'props': {}, 'views': [{'type': 'text', 'props': {'text': 'hi'}}]}
    """

    __slots__ = ('_kind', '_ordered', '_attributes', '_views')

    # Construction defaults, overridden by subclasses
    default_kind: str | None = None
    default_ordered: bool = False

    def __init__(
        self,
        kind: str | None = None,
        ordered: bool | None = None,
    ) -> None:
        """Initialize an empty WidgetNode.

        Args:
            kind: The widget type tag. If None, uses the class default.
            ordered: If True, serialize attributes as 'modifiers'.
                If None, uses the class default.

        Raises:
            ValueError: If no kind is given and the class has no default.
        """
        if kind is None:
            kind = type(self).default_kind
        if kind is None:
            raise ValueError(
                f"'{type(self).__name__}' requires a kind"
            )
        self._kind: str = kind
        self._ordered: bool = type(self).default_ordered if ordered is None else bool(ordered)
        self._attributes: dict[str, Any] = {}
        self._views: list[Any] = []

    def __repr__(self) -> str:
        mode = ', ordered' if self._ordered else ''
        return (
            f"{type(self).__name__}({self._kind!r}{mode}, "
            f"attributes={list(self._attributes)}, views={len(self._views)})"
        )

    # ==================== Identity ====================

    @property
    def kind(self) -> str:
        """The widget type tag."""
        return self._kind

    @property
    def ordered(self) -> bool:
        """True if attributes serialize as 'modifiers'."""
        return self._ordered

    # ==================== Attributes ====================

    def set_attr(self, name: str, value: Any) -> WidgetNode:
        """Store an attribute and return self for chaining.

        Setting an existing name overwrites its value in place:
        the attribute keeps its original position in 'modifiers'.
        """
        self._attributes[name] = value
        return self

    def get_attr(self, name: str | None = None, default: Any = None) -> Any:
        """Get attribute value or all attributes.

        Args:
            name: Attribute name. If None, returns all attributes.
            default: Default value if attribute not found.
        """
        if name is None:
            return self._attributes
        return self._attributes.get(name, default)

    @property
    def props(self) -> dict[str, Any]:
        """Attributes as a single mapping."""
        return dict(self._attributes)

    @property
    def modifiers(self) -> list[dict[str, Any]]:
        """Attributes as single-key mappings, in insertion order."""
        return [{name: value} for name, value in self._attributes.items()]

    # ==================== Views ====================

    @property
    def views(self) -> list[Any]:
        """The live list of child views."""
        return self._views

    @views.setter
    def views(self, views: list[Any]) -> None:
        self._views = views

    def set_views(self, views: list[Any]) -> WidgetNode:
        """Replace the child views and return self for chaining."""
        self.views = views
        return self

    def add_views(self, *views: Any) -> WidgetNode:
        """Append child views and return self for chaining.

        A non-list sequence given to set_views() is converted to a list
        first; a list held by the caller stays live.
        """
        if not isinstance(self._views, list):
            self._views = list(self._views)
        self._views.extend(views)
        return self

    # ==================== Serialization ====================

    def serialize(self) -> dict[str, Any]:
        """Build the definition of this node and its descendants.

        Returns:
            Dict with 'type', exactly one of 'props' or 'modifiers',
            and 'views' only when the node has children. Children that
            are not WidgetNode instances are passed through unchanged.
        """
        definition: dict[str, Any] = {'type': self._kind}
        if self._ordered:
            definition['modifiers'] = self.modifiers
        else:
            definition['props'] = self.props
        if self._views:
            definition['views'] = [
                view.serialize() if isinstance(view, WidgetNode) else view
                for view in self._views
            ]
        return definition

    @property
    def definition(self) -> dict[str, Any]:
        """Shortcut for serialize()."""
        return self.serialize()

    # ==================== Traversal ====================

    def walk(self, _prefix: str = '') -> Iterator[tuple[str, WidgetNode]]:
        """Walk descendant nodes depth-first.

        Paths are built from kind_N segments, where N is the position
        of the view in its parent. Pass-through values are skipped.

        Yields:
            Tuples of (path, node).

        Example:
            >>> for path, node in stack.walk():
            ...     print(path, node.kind)
            text_0 text
        """
        for i, view in enumerate(self._views):
            if not isinstance(view, WidgetNode):
                continue
            label = f"{view.kind}_{i}"
            path = f"{_prefix}.{label}" if _prefix else label
            yield path, view
            yield from view.walk(path)
