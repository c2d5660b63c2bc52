"""
================================================================================
Declarations
================================================================================

`@selector` and `@xpath` turn a method stub into a lazily resolved member.
The stub's return annotation declares the shape of the result:

    ElementHandle                 -> Shape.HANDLE        (selector only)
    List[ElementHandle]           -> Shape.HANDLE_LIST
    SomeElementObject             -> Shape.OBJECT        (selector only)
    List[SomeElementObject]       -> Shape.OBJECT_LIST

The stub body is never executed. Reading the member from an instance returns
an awaitable that queries each time it is awaited:

    heading = await page_object.heading

================================================================================
"""

from __future__ import annotations

import collections.abc
import functools
import inspect
import types
import warnings
from dataclasses import dataclass, replace
from enum import Enum
from typing import (
    Any,
    Callable,
    Generator,
    Optional,
    Tuple,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from loguru import logger
from playwright.async_api import ElementHandle

from ..errors import DeclarationError
from .objects import ElementObject


class QueryKind(str, Enum):
    """Query language of a declaration."""
    SELECTOR = "selector"
    XPATH = "xpath"


class Shape(str, Enum):
    """Declared result shape of a member."""
    HANDLE = "handle"
    HANDLE_LIST = "handle_list"
    OBJECT = "object"
    OBJECT_LIST = "object_list"

    @property
    def is_list(self) -> bool:
        return self in (Shape.HANDLE_LIST, Shape.OBJECT_LIST)


# Shapes each query kind may produce
ALLOWED_SHAPES = {
    QueryKind.SELECTOR: frozenset(Shape),
    QueryKind.XPATH: frozenset({Shape.HANDLE_LIST, Shape.OBJECT_LIST}),
}

_LIST_ORIGINS = (list, collections.abc.Sequence)
# `X | None` on Python 3.10+
_UNION_ORIGINS = tuple(u for u in (Union, getattr(types, "UnionType", None)) if u is not None)


@dataclass(frozen=True)
class Declaration:
    """
    Static query metadata attached to a member.

    Attributes:
        kind: Query language
        query: Selector or XPath expression
        name: Member name, filled in when the owning class is created
    """
    kind: QueryKind
    query: str
    name: str = ""

    @property
    def playwright_selector(self) -> str:
        """The query in Playwright selector syntax."""
        if self.kind is QueryKind.XPATH:
            return f"xpath={self.query}"
        return self.query


def classify(hint: Any) -> Tuple[Optional[Shape], Optional[Type[ElementObject]]]:
    """
    Map a return annotation to (shape, element object type).

    Returns (None, None) for annotations no declaration can produce.
    """
    origin = get_origin(hint)

    if origin in _UNION_ORIGINS:
        members = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(members) != 1:
            return None, None
        return classify(members[0])

    if origin in _LIST_ORIGINS:
        args = get_args(hint)
        if len(args) != 1:
            return None, None
        item = args[0]
        if item is ElementHandle:
            return Shape.HANDLE_LIST, None
        if inspect.isclass(item) and issubclass(item, ElementObject):
            return Shape.OBJECT_LIST, item
        return None, None

    if hint is ElementHandle:
        return Shape.HANDLE, None
    if inspect.isclass(hint) and issubclass(hint, ElementObject):
        return Shape.OBJECT, hint
    return None, None


class PendingMember:
    """
    A declared member read from an instance.

    No query runs until it is awaited, and every await queries again, so an
    unawaited read (hasattr, getattr, a debugger) costs nothing.
    """

    __slots__ = ("owner", "declared")

    def __init__(self, owner: Any, declared: "Declared"):
        self.owner = owner
        self.declared = declared

    def __await__(self) -> Generator[Any, None, Any]:
        from .resolution import resolve

        return resolve(self.owner, self.declared).__await__()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.declared.declaration.name}>"


class Declared:
    """
    Descriptor produced by `@selector` / `@xpath`.

    The shape is read from the stub's annotations on first access, so
    annotations may refer to classes defined later in the module. Query
    results are never stored.
    """

    def __init__(self, declaration: Declaration, stub: Callable[..., Any]):
        self.declaration = declaration
        self.stub = stub
        self._binding: Optional[Tuple[Optional[Shape], Optional[Type[ElementObject]]]] = None
        functools.update_wrapper(self, stub)

    def __set_name__(self, owner: type, name: str) -> None:
        self.declaration = replace(self.declaration, name=f"{owner.__name__}.{name}")

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Union["Declared", PendingMember]:
        if instance is None:
            return self
        return PendingMember(instance, self)

    def __set__(self, instance: Any, value: Any) -> None:
        raise AttributeError(f"{self.declaration.name} is a declared member and cannot be assigned")

    @property
    def binding(self) -> Tuple[Optional[Shape], Optional[Type[ElementObject]]]:
        """(shape, element object type), or (None, None) when malformed."""
        if self._binding is not None:
            return self._binding
        try:
            hints = get_type_hints(self.stub)
        except (NameError, TypeError) as e:
            logger.warning(f"Cannot read return annotation of {self.declaration.name}: {e}")
            return None, None

        self._binding = classify(hints.get("return"))
        return self._binding

    @property
    def shape(self) -> Optional[Shape]:
        return self.binding[0]

    def __repr__(self) -> str:
        d = self.declaration
        return f"<{type(self).__name__} {d.name or self.stub.__name__} {d.kind.value}={d.query!r}>"


def _declare(kind: QueryKind, query: str) -> Callable[[Callable[..., Any]], Declared]:
    def decorator(stub: Callable[..., Any]) -> Declared:
        if isinstance(stub, Declared):
            raise DeclarationError(
                f"'{stub.stub.__name__}' already has a {stub.declaration.kind.value} declaration; "
                f"a member carries exactly one of @selector or @xpath"
            )
        if not callable(stub):
            raise DeclarationError(f"@{kind.value} decorates a method stub, got {stub!r}")
        return Declared(Declaration(kind, query), stub)

    return decorator


def selector(query: str) -> Callable[[Callable[..., Any]], Declared]:
    """
    Declare a member resolved with a CSS (or any Playwright) selector.

    Args:
        query: Selector, relative to the element for ElementObject members
    """
    return _declare(QueryKind.SELECTOR, query)


def xpath(expression: str) -> Callable[[Callable[..., Any]], Declared]:
    """
    Declare a member resolved with an XPath expression.

    Deprecated: use `@selector("xpath=...")` instead. Only list shapes are
    supported.
    """
    warnings.warn(
        "@xpath is deprecated, use @selector instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return _declare(QueryKind.XPATH, expression)


__all__ = [
    "QueryKind",
    "Shape",
    "ALLOWED_SHAPES",
    "Declaration",
    "Declared",
    "PendingMember",
    "classify",
    "selector",
    "xpath",
]
