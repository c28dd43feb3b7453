"""Renderer-agnostic view tree.

Pages describe what should appear on screen as a tree of ``ViewNode`` values
built with :func:`h`. Nothing in this module knows about HTML serialization;
see ``docshome.renderer`` for that.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeAlias

Child: TypeAlias = "ViewNode | str"


@dataclass
class ViewNode:
    """One element of a view tree.

    Attributes:
        tag: Element name (``div``, ``p``, ``a``...)
        attrs: Element attributes other than inline style
        style: Inline style declarations keyed by CSS property name
        children: Child nodes; plain strings are text nodes
    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    style: dict[str, str] = field(default_factory=dict)
    children: list[ViewNode | str] = field(default_factory=list)


@dataclass
class PageView:
    """Everything needed to put one route on screen.

    Attributes:
        title: Page title for the document head
        description: Page description for the document head
        body: Page body, including any chrome added by the layout
    """

    title: str
    description: str
    body: ViewNode


def h(tag: str, *children: Child, style: dict[str, str] | None = None, **attrs: str) -> ViewNode:
    """Build a view node.

    Attribute names ending in an underscore have it stripped so reserved
    words can be passed (``class_="navbar"``).

    Args:
        tag: Element name
        *children: Child nodes or text
        style: Inline style declarations
        **attrs: Element attributes

    Returns:
        New ViewNode owning fresh copies of the given mappings
    """
    return ViewNode(
        tag=tag,
        attrs={name.rstrip("_"): value for name, value in attrs.items()},
        style=dict(style or {}),
        children=list(children),
    )


def iter_nodes(node: ViewNode) -> Iterator[ViewNode]:
    """Walk a tree depth-first, yielding element nodes in document order.

    Args:
        node: Root of the tree

    Yields:
        Each element node, starting with ``node`` itself
    """
    yield node
    for child in node.children:
        if isinstance(child, ViewNode):
            yield from iter_nodes(child)


def find_all(node: ViewNode, tag: str) -> list[ViewNode]:
    """Return every element with the given tag.

    Args:
        node: Root of the tree
        tag: Element name to match

    Returns:
        Matching nodes in document order
    """
    return [n for n in iter_nodes(node) if n.tag == tag]


def text_content(node: ViewNode) -> str:
    """Concatenate all text below a node.

    Args:
        node: Root of the tree

    Returns:
        Text of all descendant text nodes in document order
    """
    return "".join(child if isinstance(child, str) else text_content(child) for child in node.children)
