"""
Generic XML to mapping conversion for iATS response payloads.

iATS returns its results as an XML document embedded in the SOAP response
(``<IATSRESPONSE><STATUS>Success</STATUS>...``). The conversion keeps the
document shape and nothing more:

  - The root element is not a key; the result is the mapping of its children
  - Elements with children become mappings
  - Text-only elements become strings (no numeric coercion)
  - Empty elements become empty mappings
  - Siblings sharing a tag become a list in document order
  - Attributes are collected under "@attributes"
"""

from typing import Any, Union

from lxml import etree

from iats_gateway.engine.errors import ParseError

ATTRIBUTES_KEY = "@attributes"

_parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True, remove_pis=True)


def parse_xml(xml: Union[str, bytes]) -> dict[str, Any]:
    """
    Convert an XML document into nested dicts/lists of strings.

    Args:
        xml: The XML document.

    Returns:
        Mapping of the root element's children.

    Raises:
        ParseError: If the document is not well-formed.
    """
    if isinstance(xml, str):
        # lxml rejects str input carrying an encoding declaration
        xml = xml.encode("utf-8")
    try:
        root = etree.fromstring(xml, parser=_parser)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(f"Malformed XML: {e}") from e

    value = _convert(root)
    if isinstance(value, str):
        return {"0": value}
    return value


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def _convert(element: Any) -> Union[str, dict[str, Any]]:
    children = [child for child in element if isinstance(child.tag, str)]
    attributes = {_local_name(k): v for k, v in element.attrib.items()}

    if not children:
        text = element.text or ""
        if text.strip() and not attributes:
            return text
        result: dict[str, Any] = {}
        if attributes:
            result[ATTRIBUTES_KEY] = attributes
        if text.strip():
            result["0"] = text
        return result

    result = {}
    if attributes:
        result[ATTRIBUTES_KEY] = attributes
    for child in children:
        name = _local_name(child.tag)
        value = _convert(child)
        if name not in result:
            result[name] = value
        elif isinstance(result[name], list):
            result[name].append(value)
        else:
            result[name] = [result[name], value]
    return result
