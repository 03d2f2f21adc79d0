"""A small wrapper around DOM nodes for reading and writing XML documents."""

from __future__ import annotations

import re
from enum import Enum, IntEnum
from typing import Iterator
from xml.dom import minidom
from xml.dom.minidom import Node
from xml.parsers.expat import ExpatError

_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class NodeType(IntEnum):
    """Kinds of node that can appear in a document."""

    INVALID = 0
    ELEMENT = 1
    ATTRIBUTE = 2
    TEXT = 3
    CDATA_SECTION = 4
    ENTITY_REFERENCE = 5
    ENTITY = 6
    PROCESSING_INSTRUCTION = 7
    COMMENT = 8
    DOCUMENT = 9
    DOCUMENT_TYPE = 10
    DOCUMENT_FRAGMENT = 11
    NOTATION = 12


class ErrorKind(Enum):
    """What went wrong in an XML operation."""

    NONE = 0
    UNABLE_TO_OPEN = 1
    UNABLE_TO_WRITE = 2
    UNABLE_TO_CREATE = 3
    NO_ROOT = 4


class XmlError(Exception):
    """Raised when a document cannot be opened, created or written."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer conversion could be performed: {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no float conversion could be performed: {text!r}")
    return float(match.group(1))


def _drop_blank_text(node: Node) -> None:
    """Remove whitespace-only text nodes, as a non-preserving parser would."""
    for child in list(node.childNodes):
        if child.nodeType == Node.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
            child.unlink()
        else:
            _drop_blank_text(child)


def _format_value(value: str | int | float) -> str:
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


class XmlNode:
    """One node of an XML document; the root node stands for the document."""

    def __init__(self, node: Node | None = None,
                 document: minidom.Document | None = None) -> None:
        self._node = node
        self._document = document

    @staticmethod
    def open_document(filename: str) -> XmlNode:
        """Open an XML file and return its root node."""
        node = XmlNode()
        node.open(filename)
        return node

    @staticmethod
    def create_document(rootname: str) -> XmlNode:
        """Create an empty document and return its root node."""
        node = XmlNode()
        node.create(rootname)
        return node

    def open(self, filename: str) -> None:
        """Load a file into this node, which becomes the document root."""
        try:
            document = minidom.parse(str(filename))
        except (OSError, ExpatError, UnicodeDecodeError) as exc:
            raise XmlError(ErrorKind.UNABLE_TO_OPEN,
                           f"Unable to open file: {filename}") from exc
        root = document.documentElement
        if root is None:
            raise XmlError(ErrorKind.NO_ROOT,
                           f"Unable to find a root element in file: {filename}")
        _drop_blank_text(document)
        self._document = document
        self._node = root

    def create(self, rootname: str) -> None:
        """Start a new document in this node with a root element of that name."""
        try:
            document = minidom.getDOMImplementation().createDocument(None, rootname, None)
        except Exception as exc:
            raise XmlError(ErrorKind.UNABLE_TO_CREATE,
                           "Failed to create an XML document to use") from exc
        self._document = document
        self._node = document.documentElement

    def _doc(self) -> minidom.Document:
        if self._document is None:
            raise XmlError(ErrorKind.NO_ROOT, "No XML document is open")
        return self._document

    def _dom(self) -> Node:
        if self._node is None:
            raise XmlError(ErrorKind.NO_ROOT, "No XML document is open")
        return self._node

    def save(self, filename: str) -> None:
        """Write the whole document to a file."""
        text = self.to_xml()
        try:
            with open(filename, "w", encoding="utf-8") as handle:
                handle.write(text)
        except OSError as exc:
            raise XmlError(ErrorKind.UNABLE_TO_WRITE,
                           f"Unable to write file: {filename}") from exc

    def to_xml(self) -> str:
        """The whole document as a string."""
        document = self._doc()
        return _DECLARATION + "".join(child.toxml() for child in document.childNodes)

    def name(self) -> str:
        return self._dom().nodeName

    def node_type(self) -> NodeType:
        return NodeType(self._dom().nodeType)

    def value(self) -> str:
        """The node value, or an empty string for nodes without one."""
        value = self._dom().nodeValue
        return "" if value is None else value

    def int_value(self) -> int:
        return _parse_int(self.value())

    def float_value(self) -> float:
        return _parse_float(self.value())

    def get_attribute(self, name: str) -> XmlNode | None:
        """The named attribute as a node, or None when it does not exist."""
        attributes = self._dom().attributes
        if attributes is None:
            return None
        attr = attributes.get(name)
        if attr is None:
            return None
        return XmlNode(attr, self._document)

    def attribute_value(self, name: str, default: str) -> str:
        attr = self.get_attribute(name)
        return default if attr is None else attr.value()

    def attribute_int(self, name: str, default: int) -> int:
        attr = self.get_attribute(name)
        return default if attr is None else attr.int_value()

    def attribute_float(self, name: str, default: float) -> float:
        attr = self.get_attribute(name)
        return default if attr is None else attr.float_value()

    def set_attribute(self, name: str, value: str | int | float) -> None:
        """Set an attribute; has no effect on nodes that are not elements."""
        node = self._dom()
        if node.nodeType == Node.ELEMENT_NODE:
            node.setAttribute(name, _format_value(value))

    def add_child(self, name: str) -> XmlNode:
        """Append a new element child and return it."""
        element = self._doc().createElement(name)
        self._dom().appendChild(element)
        return XmlNode(element, self._document)

    def child(self, n: int) -> XmlNode:
        children = self._dom().childNodes
        if not 0 <= n < len(children):
            raise IndexError(f"child index out of range: {n}")
        return XmlNode(children[n], self._document)

    def children(self) -> list[XmlNode]:
        return [XmlNode(child, self._document) for child in self._dom().childNodes]

    def __len__(self) -> int:
        return len(self._dom().childNodes)

    def __iter__(self) -> Iterator[XmlNode]:
        for child in self._dom().childNodes:
            yield XmlNode(child, self._document)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XmlNode):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        if self._node is None:
            return "XmlNode()"
        return f"XmlNode({self._node.nodeName!r})"