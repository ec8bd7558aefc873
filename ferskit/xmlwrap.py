"""Thin object layer over lxml for simulation documents: elements, documents, validation."""

from __future__ import annotations

import copy
import io
import os

from lxml import etree


class XmlException(RuntimeError):
    """Raised for XML loading, structure and validation errors."""


def _is_element(node: object) -> bool:
    return etree.iselement(node) and isinstance(node.tag, str)


def _detach(node: etree._Element) -> None:
    """Remove ``node`` from its parent, keeping the text that follows it."""
    parent = node.getparent()
    if parent is None:
        return
    tail = node.tail or ""
    previous = node.getprevious()
    if tail:
        if previous is not None:
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail
    node.tail = None
    parent.remove(node)


class XmlElement:
    """A possibly empty reference to an element of an XML document."""

    def __init__(self, node: etree._Element | None = None) -> None:
        self._node = node

    @classmethod
    def create(cls, name: str) -> XmlElement:
        """Return a new element with ``name`` that belongs to no document yet."""
        return cls(etree.Element(name))

    @property
    def node(self) -> etree._Element | None:
        """The underlying lxml element, or None for an empty reference."""
        return self._node

    @property
    def valid(self) -> bool:
        """True when this refers to an actual element."""
        return self._node is not None

    def __bool__(self) -> bool:
        return self.valid

    def _require(self) -> etree._Element:
        if self._node is None:
            raise XmlException("Operation on an invalid XML element")
        return self._node

    @property
    def name(self) -> str:
        """The element's tag name."""
        return self._require().tag

    @property
    def text(self) -> str:
        """All text inside the element, descendants included; empty for an empty reference."""
        if self._node is None:
            return ""
        return "".join(self._node.itertext())

    @text.setter
    def text(self, value: str) -> None:
        node = self._require()
        for child in list(node):
            node.remove(child)
        node.text = value

    def attribute(self, name: str) -> str:
        """Return the value of attribute ``name``; raise XmlException if it is absent."""
        value = None if self._node is None else self._node.get(name)
        if value is None:
            raise XmlException(f"Attribute not found: {name}")
        return value

    def set_attribute(self, name: str, value: str) -> None:
        """Set attribute ``name`` to ``value``."""
        self._require().set(name, value)

    def add_child(self, name: str) -> XmlElement:
        """Append a new child element called ``name`` and return it."""
        return XmlElement(etree.SubElement(self._require(), name))

    def child_element(self, name: str = "", index: int = 0) -> XmlElement:
        """Return the ``index``-th child element with ``name`` (any name if empty).

        An empty reference comes back when there is no such child.
        """
        if self._node is None:
            return XmlElement()
        matches = (
            child
            for child in self._node
            if _is_element(child) and (not name or child.tag == name)
        )
        for position, child in enumerate(matches):
            if position == index:
                return XmlElement(child)
        return XmlElement()


class XmlDocument:
    """An XML document with an optional root element."""

    def __init__(self) -> None:
        self._tree: etree._ElementTree | None = None

    @property
    def root(self) -> XmlElement:
        """The root element; raises XmlException if the document has none."""
        if self._tree is None:
            raise XmlException("Document not loaded")
        node = self._tree.getroot()
        if node is None:
            raise XmlException("Root element not found")
        return XmlElement(node)

    @root.setter
    def root(self, element: XmlElement) -> None:
        if element.node is None:
            raise XmlException("Cannot use an invalid element as root")
        self._tree = etree.ElementTree(element.node)

    def load_file(self, filename: str | os.PathLike[str]) -> None:
        """Replace the document with the contents of ``filename``."""
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            self._tree = etree.parse(os.fspath(filename), parser)
        except (OSError, etree.XMLSyntaxError) as err:
            self._tree = None
            raise XmlException(f"Failed to load XML file: {filename}") from err

    def save_file(self, filename: str | os.PathLike[str]) -> None:
        """Write the document to ``filename`` as indented UTF-8."""
        if self._tree is None:
            raise XmlException("Document is null; Cannot save to file")
        try:
            self._tree.write(
                os.fspath(filename), encoding="UTF-8", xml_declaration=True, pretty_print=True
            )
        except OSError as err:
            raise XmlException(f"Failed to save XML file: {filename}") from err

    def validate_with_dtd(self, dtd_data: bytes) -> bool:
        """Validate against the DTD in ``dtd_data``; raise XmlException on failure."""
        try:
            dtd = etree.DTD(io.BytesIO(dtd_data))
        except etree.DTDParseError as err:
            raise XmlException("Failed to parse DTD from memory.") from err
        if not dtd.validate(self.root.node):
            raise XmlException("XML failed DTD validation.")
        return True

    def validate_with_xsd(self, xsd_data: bytes) -> bool:
        """Validate against the XML schema in ``xsd_data``; raise XmlException on failure."""
        try:
            schema = etree.XMLSchema(etree.fromstring(xsd_data))
        except (etree.XMLSyntaxError, etree.XMLSchemaParseError) as err:
            raise XmlException("Failed to parse schema from memory.") from err
        if not schema.validate(self._tree if self._tree is not None else self.root.node):
            raise XmlException("XML failed XSD validation.")
        return True


def merge_xml_documents(main_doc: XmlDocument, included_doc: XmlDocument) -> None:
    """Append copies of the included document's top-level elements to the main root."""
    main_root = main_doc.root.node
    for child in included_doc.root.node:
        if _is_element(child):
            clone = copy.deepcopy(child)
            clone.tail = None
            main_root.append(clone)


def remove_include_elements(doc: XmlDocument) -> None:
    """Remove every ``include`` element directly under the document root."""
    root = doc.root
    while (include := root.child_element("include", 0)).valid:
        _detach(include.node)