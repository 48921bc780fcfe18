"""XMP metadata packets (a simplified Dublin Core subset)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .util import Name, Stream

_PACKET_ID = "W5M0MpCehiHzreSzNTczkc9d"
_NS_META = "adobe:ns:meta/"
_NS_RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
_NS_DC = "http://purl.org/dc/elements/1.1/"

_XML_ESCAPES = str.maketrans(
    {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&apos;"}
)

# Document-info key -> (Dublin Core element, RDF container, language-tagged item)
_DC_FIELDS = (
    ("Title", "title", "Alt", True),
    ("Author", "creator", "Seq", False),
    ("Subject", "description", "Alt", True),
)


def escape_xml(text: str) -> str:
    """Escape the five XML special characters."""
    return text.translate(_XML_ESCAPES)


def _opening() -> str:
    return "\n".join(
        (
            f'<?xpacket begin="" id="{_PACKET_ID}"?>',
            f'<x:xmpmeta xmlns:x="{_NS_META}">',
            f'<rdf:RDF xmlns:rdf="{_NS_RDF}">',
            f'<rdf:Description rdf:about="" xmlns:dc="{_NS_DC}">',
        )
    )


def _closing() -> str:
    closers = ("</rdf:Description>", "</rdf:RDF>", "</x:xmpmeta>", '<?xpacket end="w"?>')
    return "".join(f"\n{line}" for line in closers)


def _dc_element(element: str, container: str, lang_tagged: bool, value: str) -> str:
    lang = ' xml:lang="x-default"' if lang_tagged else ""
    lines = (
        (1, f"<dc:{element}>"),
        (2, f"<rdf:{container}>"),
        (3, f"<rdf:li{lang}>{escape_xml(value)}</rdf:li>"),
        (2, f"</rdf:{container}>"),
        (1, f"</dc:{element}>"),
    )
    return "".join(f"\n{'  ' * depth}{text}" for depth, text in lines)


@dataclass
class XmpMetadata:
    """An XMP packet to embed as a metadata stream."""

    xmp_packet: str

    @staticmethod
    def from_packet(packet: str) -> "XmpMetadata":
        return XmpMetadata(packet)

    @staticmethod
    def from_document_info(info: Mapping[str, str]) -> "XmpMetadata":
        """Build a packet from the Title, Author and Subject of document info."""
        parts = [_opening()]
        for key, element, container, lang_tagged in _DC_FIELDS:
            value = info.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise TypeError(f"document info {key} must be a string")
            parts.append(_dc_element(element, container, lang_tagged, value))
        parts.append(_closing())
        return XmpMetadata("".join(parts))

    def to_stream(self, object_number: int) -> Stream:
        """The metadata stream object carrying the packet."""
        return Stream(
            dictionary={"Type": Name("Metadata"), "SubType": Name("XML")},
            content=self.xmp_packet.encode("utf-8"),
            object_number=object_number,
        )