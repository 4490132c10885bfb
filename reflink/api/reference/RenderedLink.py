"""RenderedLink model (UNO: single model)."""

import xml.etree.ElementTree as etree
from dataclasses import dataclass

from jinja2 import BaseLoader, Environment, StrictUndefined

_ENV = Environment(loader=BaseLoader(), autoescape=True, undefined=StrictUndefined)
_TEMPLATE = _ENV.from_string(
    '<a href="{{ link.href }}"'
    "{% for name, value in link.data %} data-{{ name }}=\"{{ value }}\"{% endfor %}"
    ' title="{{ link.title }}" class="{{ link.classes | join(" ") }}">{{ link.text }}</a>'
)


@dataclass(frozen=True)
class RenderedLink:
    """A reference rendered as a hyperlink.

    ``data`` holds (name, value) pairs in output order, names without the
    ``data-`` prefix.
    """

    href: str
    text: str
    title: str
    classes: tuple[str, ...]
    data: tuple[tuple[str, str], ...]

    def attributes(self) -> dict[str, str]:
        attrib = {"href": self.href}
        attrib.update((f"data-{name}", value) for name, value in self.data)
        attrib["title"] = self.title
        attrib["class"] = " ".join(self.classes)
        return attrib

    def to_html(self) -> str:
        """Markup for the link with every interpolated value escaped."""
        return _TEMPLATE.render(link=self)

    def to_element(self) -> etree.Element:
        element = etree.Element("a", self.attributes())
        element.text = self.text
        return element
