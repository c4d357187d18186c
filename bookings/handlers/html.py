"""Small HTML element model for the booking box.

Elements are a closed set of frozen dataclasses rendered by ``render``.
Every attribute value and text node is escaped.
"""

from dataclasses import dataclass, field
from functools import singledispatch
from django.utils.html import escape, format_html, format_html_join
from django.utils.safestring import SafeString, mark_safe

Attrs = tuple[tuple[str, object], ...]


@dataclass(frozen=True)
class Text:
    value: object


@dataclass(frozen=True)
class Element:
    """Generic container element (div, p, form, fieldset, ...)."""

    tag: str
    children: tuple["Node", ...] = ()
    classes: str = ""
    attrs: Attrs = ()


@dataclass(frozen=True)
class Link:
    href: str
    text: str
    classes: str = ""
    attrs: Attrs = ()


@dataclass(frozen=True)
class Label:
    text: str
    for_id: str = ""
    classes: str = ""


@dataclass(frozen=True)
class HiddenInput:
    name: str
    value: object


@dataclass(frozen=True)
class NumberInput:
    name: str
    value: object = 1
    id: str = ""
    classes: str = ""
    input_type: str = "number"
    min: int | None = 1
    step: int | None = 1
    attrs: Attrs = ()


@dataclass(frozen=True)
class RadioInput:
    name: str
    value: object
    id: str
    checked: bool = False
    attrs: Attrs = ()


@dataclass(frozen=True)
class Option:
    value: object
    text: str
    attrs: Attrs = ()


@dataclass(frozen=True)
class Select:
    name: str
    options: tuple[Option, ...]
    id: str = ""
    classes: str = ""
    size: int | None = None
    attrs: Attrs = ()


@dataclass(frozen=True)
class Button:
    text: str
    id: str = ""
    classes: str = ""
    button_type: str = "submit"


@dataclass(frozen=True)
class TableCell:
    """A ``td`` cell, or a ``th`` cell when ``header`` is set."""

    content: tuple["Node", ...] = ()
    header: bool = False
    scope: str = ""
    abbr: str = ""
    colspan: int = -1
    rowspan: int = -1
    classes: str = ""


@dataclass(frozen=True)
class TableRow:
    cells: tuple[TableCell, ...] = field(default_factory=tuple)
    attrs: Attrs = ()


Node = (
    Text | Element | Link | Label | HiddenInput | NumberInput | RadioInput
    | Option | Select | Button | TableCell | TableRow
)


_KEEP_EMPTY = frozenset({"value"})


def _attrs(*pairs: tuple[str, object]) -> SafeString:
    """Render attributes, skipping None, False and empty values (except value)."""
    rendered = []
    for name, value in pairs:
        if value is None or value is False or (value == "" and name not in _KEEP_EMPTY):
            continue
        if value is True:
            rendered.append(format_html(" {}", name))
        else:
            rendered.append(format_html(' {}="{}"', name, value))
    return mark_safe("".join(rendered))


def _children(nodes: tuple["Node", ...]) -> SafeString:
    return format_html_join("", "{}", ((render(node),) for node in nodes))


@singledispatch
def render(node: object) -> SafeString:
    raise TypeError(f"Cannot render {type(node).__name__}")


@render.register
def _(node: Text) -> SafeString:
    return escape(node.value)


@render.register
def _(node: Element) -> SafeString:
    return format_html(
        "<{tag}{attrs}>{children}</{tag}>",
        tag=node.tag,
        attrs=_attrs(("class", node.classes), *node.attrs),
        children=_children(node.children),
    )


@render.register
def _(node: Link) -> SafeString:
    return format_html(
        "<a{}>{}</a>", _attrs(("href", node.href), ("class", node.classes), *node.attrs), node.text
    )


@render.register
def _(node: Label) -> SafeString:
    return format_html(
        "<label{}>{}</label>", _attrs(("class", node.classes), ("for", node.for_id)), node.text
    )


@render.register
def _(node: HiddenInput) -> SafeString:
    return format_html(
        "<input{}>", _attrs(("type", "hidden"), ("name", node.name), ("value", node.value))
    )


@render.register
def _(node: NumberInput) -> SafeString:
    return format_html(
        "<input{}>",
        _attrs(
            ("type", node.input_type),
            ("id", node.id),
            ("class", node.classes),
            ("name", node.name),
            ("min", node.min),
            ("step", node.step),
            ("value", node.value),
            *node.attrs,
        ),
    )


@render.register
def _(node: RadioInput) -> SafeString:
    return format_html(
        "<input{}>",
        _attrs(
            ("type", "radio"),
            ("id", node.id),
            ("name", node.name),
            ("value", node.value),
            *node.attrs,
            ("checked", node.checked),
        ),
    )


@render.register
def _(node: Option) -> SafeString:
    return format_html("<option{}>{}</option>", _attrs(("value", node.value), *node.attrs), node.text)


@render.register
def _(node: Select) -> SafeString:
    return format_html(
        "<select{}>{}</select>",
        _attrs(
            ("id", node.id),
            ("name", node.name),
            ("class", node.classes),
            ("size", node.size),
            *node.attrs,
        ),
        _children(node.options),
    )


@render.register
def _(node: Button) -> SafeString:
    return format_html(
        "<button{}>{}</button>",
        _attrs(("id", node.id), ("type", node.button_type), ("class", node.classes)),
        node.text,
    )


@render.register
def _(node: TableCell) -> SafeString:
    tag = "th" if node.header else "td"
    return format_html(
        "<{tag}{attrs}>{children}</{tag}>",
        tag=tag,
        attrs=_attrs(
            ("class", node.classes),
            ("scope", node.scope),
            ("abbr", node.abbr if node.header else ""),
            ("colspan", node.colspan if node.colspan > 1 else None),
            ("rowspan", node.rowspan if node.rowspan > -1 else None),
        ),
        children=_children(node.content),
    )


@render.register
def _(node: TableRow) -> SafeString:
    return format_html("<tr{}>{}</tr>", _attrs(*node.attrs), _children(node.cells))
