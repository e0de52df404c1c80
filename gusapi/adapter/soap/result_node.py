# ============================================================================
# SCOPE: INFRASTRUCTURE LAYER (GUS Registry)
# Description: Navigable tree over decoded XML payloads.
# ============================================================================
"""Result Node.

Thin wrapper over ElementTree elements giving name-based access to
children and attributes of a decoded registry payload:

    node = ResultNode.from_string("<root><dane><Nip>123</Nip></dane></root>")
    node.dane.Nip.text  # "123"
"""

import logging
from typing import Any, Iterator
from xml.etree import ElementTree

logger = logging.getLogger(__name__)


def local_name(tag: str) -> str:
    """Get local name from qualified XML tag."""
    return tag.split("}")[-1] if "}" in tag else tag


class ResultNode:
    """Element of a decoded XML payload.

    Child elements are reachable as attributes (first match by local name),
    XML attributes through item access.
    """

    __slots__ = ("_element",)

    def __init__(self, element: ElementTree.Element) -> None:
        self._element = element

    @classmethod
    def from_string(cls, xml_text: str) -> "ResultNode":
        """Parse XML text into a node.

        Raises:
            ElementTree.ParseError: If the text is not well-formed XML.
        """
        return cls(ElementTree.fromstring(xml_text))

    @property
    def element(self) -> ElementTree.Element:
        """Underlying ElementTree element."""
        return self._element

    @property
    def tag(self) -> str:
        return local_name(self._element.tag)

    @property
    def text(self) -> str:
        return self._element.text or ""

    @property
    def attrib(self) -> dict[str, str]:
        return dict(self._element.attrib)

    def find(self, name: str) -> "ResultNode | None":
        """First child with the given local name, or None."""
        for child in self._element:
            if local_name(child.tag) == name:
                return ResultNode(child)
        return None

    def find_all(self, name: str) -> list["ResultNode"]:
        """All children with the given local name."""
        return [ResultNode(child) for child in self._element if local_name(child.tag) == name]

    def get(self, name: str, default: str | None = None) -> str | None:
        """Text of the first child with the given name."""
        child = self.find(name)
        return child.text if child is not None else default

    def __getattr__(self, name: str) -> "ResultNode":
        if name.startswith("_"):
            raise AttributeError(name)
        child = self.find(name)
        if child is None:
            raise AttributeError(f"<{self.tag}> has no child element '{name}'")
        return child

    def __getitem__(self, attribute: str) -> str:
        return self._element.attrib[attribute]

    def __iter__(self) -> Iterator["ResultNode"]:
        return (ResultNode(child) for child in self._element)

    def __len__(self) -> int:
        return len(self._element)

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"ResultNode(<{self.tag}>, children={len(self)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultNode):
            return NotImplemented
        return (
            self.tag == other.tag
            and self.text.strip() == other.text.strip()
            and self.attrib == other.attrib
            and len(self) == len(other)
            and all(a == b for a, b in zip(self, other))
        )

    __hash__ = None  # type: ignore[assignment]

    def to_dict(self, max_depth: int = 10) -> dict[str, Any]:
        """Convert children to a dictionary.

        Leaf children map to their text, repeated names to lists.
        Nesting beyond max_depth is truncated.
        """
        return self._element_to_dict(self._element, max_depth)

    def to_xml(self, pretty: bool = False) -> str:
        """Serialize the node back to XML text."""
        element = self._element
        if pretty:
            element = ElementTree.fromstring(ElementTree.tostring(element))
            ElementTree.indent(element)
        return ElementTree.tostring(element, encoding="unicode")

    def _element_to_dict(
        self,
        elem: ElementTree.Element,
        max_depth: int,
        current_depth: int = 0,
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}

        if current_depth >= max_depth:
            logger.warning(f"Max depth ({max_depth}) reached. Truncating at element: {local_name(elem.tag)}")
            return {"_truncated": True, "_tag": local_name(elem.tag)}

        for child in elem:
            tag = local_name(child.tag)
            value: Any = self._element_to_dict(child, max_depth, current_depth + 1) if len(child) > 0 else child.text
            if tag in result:
                if not isinstance(result[tag], list):
                    result[tag] = [result[tag]]
                result[tag].append(value)
            else:
                result[tag] = value

        return result
