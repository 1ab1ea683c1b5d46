"""
Vue single-file components, one per interface.

Show elements become HTML elements, conditionals become ``v-if``/``v-else``
wrappers and iterations become ``v-for`` wrappers.
"""

from ...core import ir
from ..base import Generator, GeneratorResult
from ..base.utils import to_kebab_case, to_pascal_case
from .expressions import to_vue_condition

INDENT = "  "

TAB_TAG = "button"
DEFAULT_TAG = "div"
QUOTES = "\"'"

# Element kinds that map straight onto an HTML tag
HTML_TAGS = (
    "header",
    "footer",
    "nav",
    "main",
    "section",
    "article",
    "aside",
    "button",
    "input",
    "textarea",
    "form",
    "label",
    "img",
    "video",
    "audio",
    "canvas",
    "svg",
    "table",
    "ul",
    "ol",
    "li",
    "span",
    "p",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
)


def html_tag(element_name: str) -> str:
    """
    Pick the HTML tag for a display kind.

    ``tab`` and ``*_tab`` kinds become buttons. Otherwise the first known tag
    that equals the kind, or appears in it as a ``_``-separated part, wins.
    """
    name = element_name.lower()

    if (name == "tab" or name.endswith("_tab")) and "table" not in name:
        return TAB_TAG

    for tag in HTML_TAGS:
        if name == tag or f"_{tag}" in name or f"{tag}_" in name:
            return tag
    return DEFAULT_TAG


def is_dynamic(value: str) -> bool:
    return "." in value or "(" in value or "+" in value


def render_properties(properties: dict[str, str]) -> tuple[list[str], str | None]:
    """
    Turn element properties into attributes and text content.

    Only ``text``, ``label``, ``active``, ``src`` and ``icon`` have a rendering;
    other properties (styling, ``on_*`` handlers) produce nothing.

    Returns:
        Tuple of (attributes, text content or None)
    """
    attributes: list[str] = []
    text: str | None = None

    for key, value in properties.items():
        if key in ("text", "label"):
            if not is_dynamic(value) and value[:1] in ("'", '"'):
                text = value[1:-1]
            else:
                text = f"{{{{ {value} }}}}"
        elif key == "active":
            attributes.append(f':class="{{ active: {to_vue_condition(value)} }}"')
        elif key == "src":
            attributes.append(f':src="{value}"' if "." in value else f'src="{value}"')
        elif key == "icon":
            if "?" in value or "." in value:
                attributes.append(f':data-icon="{value}"')
            else:
                icon = value.strip(QUOTES)
                attributes.append(f'data-icon="{icon}"')

    return attributes, text


class ComponentsGenerator(Generator):
    """Generates ``src/components/<Name>.vue`` for every interface."""

    def generate(self) -> GeneratorResult:
        result = GeneratorResult()
        for interface in self.document.interfaces:
            path = f"src/components/{to_pascal_case(interface.name)}.vue"
            result.add_file(path, self._build_component(interface))
        return result

    def _build_component(self, interface: ir.InterfaceSection) -> str:
        css_class = to_kebab_case(interface.name)

        lines = ["<template>", f'{INDENT}<div class="{css_class}">']
        for element in interface.elements:
            self._render_element(element, lines, 2)
        lines += [f"{INDENT}</div>", "</template>", ""]

        lines += [
            '<script setup lang="ts">',
            "import { computed } from 'vue';",
            "import { useAppStore } from '../stores/app';",
            "",
            "const store = useAppStore();",
            "",
        ]
        if self.document.computed:
            lines.append("// Computed properties from store")
            lines += [f"// const {c.name} = store.{c.name};" for c in self.document.computed]
            lines.append("")
        lines += ["</script>", ""]

        lines += ["<style scoped>", f".{css_class} {{", "}", "</style>"]
        return "\n".join(lines)

    def _render_element(self, element: ir.UIElement, lines: list[str], level: int) -> None:
        if isinstance(element, ir.ShowElement):
            self._render_show(element, lines, level)
        elif isinstance(element, ir.ConditionalElement):
            self._render_conditional(element, lines, level)
        else:
            self._render_iteration(element, lines, level)

    def _render_show(self, element: ir.ShowElement, lines: list[str], level: int) -> None:
        pad = INDENT * level
        tag = html_tag(element.element_name)
        attributes, text = render_properties(element.properties)
        attributes.insert(0, f'class="{to_kebab_case(element.element_name)}"')

        lines.append(f"{pad}<{tag} {' '.join(attributes)}>")
        if text:
            lines.append(f"{pad}{INDENT}{text}")
        for child in element.children:
            self._render_element(child, lines, level + 1)
        lines.append(f"{pad}</{tag}>")

    def _render_conditional(
        self, element: ir.ConditionalElement, lines: list[str], level: int
    ) -> None:
        pad = INDENT * level
        lines.append(f'{pad}<div v-if="{to_vue_condition(element.condition)}">')
        for child in element.then:
            self._render_element(child, lines, level + 1)
        lines.append(f"{pad}</div>")

        if element.else_:
            lines.append(f"{pad}<div v-else>")
            for child in element.else_:
                self._render_element(child, lines, level + 1)
            lines.append(f"{pad}</div>")

    def _render_iteration(self, element: ir.IterationElement, lines: list[str], level: int) -> None:
        pad = INDENT * level
        item = element.item_name
        lines.append(f'{pad}<div v-for="{item} in {element.collection}" :key="{item}.id">')
        for child in element.body:
            self._render_element(child, lines, level + 1)
        lines.append(f"{pad}</div>")
