"""
Interface types for APML IR.

An interface is a tree of display elements. Show elements and both branches
of a conditional may contain further elements, so nesting depth is unbounded.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ShowElement(BaseModel):
    """
    A ``show <Kind> [<Name>]:`` element.

    Attributes:
        element_name: Display-kind keyword (e.g. ``header``, ``post_card``)
        name: Explicit name, defaulting to the kind
        properties: Raw property text keyed by property name
        children: Nested elements
    """

    type: Literal["show"] = "show"
    element_name: str
    name: str
    properties: dict[str, str] = Field(default_factory=dict)
    children: list[UIElement] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ConditionalElement(BaseModel):
    """
    A ``when <Condition>:`` (or ``if``) element with an optional ``else:`` branch.

    The condition is kept as raw expression text.
    """

    type: Literal["when", "if"] = "when"
    condition: str
    then: list[UIElement] = Field(default_factory=list)
    else_: list[UIElement] | None = Field(default=None, alias="else")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class IterationElement(BaseModel):
    """A ``for_each <item> in <collection>:`` element."""

    type: Literal["for_each"] = "for_each"
    item_name: str
    collection: str
    body: list[UIElement] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


UIElement = ShowElement | ConditionalElement | IterationElement


ShowElement.model_rebuild()
ConditionalElement.model_rebuild()
IterationElement.model_rebuild()


class InterfaceSection(BaseModel):
    """An ``interface <Name>:`` declaration and its root-level display tree."""

    name: str
    elements: list[UIElement] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def walk(self) -> list[UIElement]:
        """Return every element of the tree, depth first, in source order."""
        found: list[UIElement] = []
        stack = list(reversed(self.elements))
        while stack:
            element = stack.pop()
            found.append(element)
            stack.extend(reversed(child_elements(element)))
        return found


def child_elements(element: UIElement) -> list[UIElement]:
    """All direct children of an element, across branches."""
    if isinstance(element, ShowElement):
        return list(element.children)
    if isinstance(element, ConditionalElement):
        return list(element.then) + list(element.else_ or [])
    return list(element.body)
