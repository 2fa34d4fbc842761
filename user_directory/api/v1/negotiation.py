"""
Response rendering with Accept-header negotiation between JSON and XML.

JSON is the default. The highest q-value wins; on a tie the type listed first
in the Accept header wins. Ranges with q=0 are not acceptable and never chosen.
"""

# Standard library imports
import re
from typing import Any, Dict, Optional
from uuid import UUID
import xml.etree.ElementTree as ET

# External package imports
from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

JSON_FORMAT = "json"
XML_FORMAT = "xml"

XML_MEDIA_TYPE = "application/xml"

_MEDIA_FORMATS: Dict[str, str] = {
    "application/json": JSON_FORMAT,
    "text/json": JSON_FORMAT,
    "application/*": JSON_FORMAT,
    "*/*": JSON_FORMAT,
    "application/xml": XML_FORMAT,
    "text/xml": XML_FORMAT,
}

# Not allowed anywhere in an XML 1.0 document
_XML_ILLEGAL_CHARS = re.compile(r"[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")

# Element names for XML bodies
_XML_ROOTS: Dict[str, str] = {
    "UserResponse": "UserDto",
}


def preferred_format(accept: Optional[str]) -> str:
    """Pick json or xml from an Accept header value"""
    if not accept:
        return JSON_FORMAT

    best_format, best_quality = JSON_FORMAT, -1.0
    for media_range in accept.split(","):
        media_type, _, params = media_range.strip().partition(";")
        quality = 1.0
        for param in params.split(";"):
            name, _, value = param.strip().partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        media_format = _MEDIA_FORMATS.get(media_type.strip().lower())
        if media_format is None or quality <= 0:
            continue
        if quality > best_quality:
            best_format, best_quality = media_format, quality
    return best_format


def _xml_text(value: Any) -> str:
    """Text content with characters outside the XML 1.0 Char range removed"""
    return _XML_ILLEGAL_CHARS.sub("", str(value))


def _pascal(name: str) -> str:
    return name[:1].upper() + name[1:]


def _model_element(model: BaseModel) -> ET.Element:
    element = ET.Element(_XML_ROOTS.get(type(model).__name__, type(model).__name__))
    for key, value in model.model_dump(by_alias=True).items():
        child = ET.SubElement(element, _pascal(key))
        if value is not None:
            child.text = _xml_text(value)
    return element


def to_xml(content: Any) -> bytes:
    """Render a DTO, list of DTOs, UUID or error map as XML"""
    if isinstance(content, BaseModel):
        root = _model_element(content)
    elif isinstance(content, list):
        item_name = _XML_ROOTS.get(type(content[0]).__name__, "Item") if content else "UserDto"
        root = ET.Element(f"ArrayOf{item_name}")
        for item in content:
            root.append(_model_element(item))
    elif isinstance(content, UUID):
        root = ET.Element("guid")
        root.text = str(content)
    elif isinstance(content, dict):
        root = ET.Element("SerializableError")
        for key, value in content.items():
            ET.SubElement(root, str(key)).text = _xml_text(value)
    else:
        raise TypeError(f"Cannot render {type(content).__name__} as XML")
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def render(
    request: Request,
    content: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """
    Build a response in the format the client asked for
    
    Args:
        request: Incoming request (its Accept header decides the format)
        content: DTO, list of DTOs, UUID or dict to send
        status_code: HTTP status
        headers: Extra response headers
        
    Returns:
        JSONResponse or XML Response
    """
    if preferred_format(request.headers.get("accept")) == XML_FORMAT:
        return Response(
            content=to_xml(content),
            status_code=status_code,
            headers=headers,
            media_type=XML_MEDIA_TYPE,
        )
    return JSONResponse(
        content=jsonable_encoder(content, by_alias=True),
        status_code=status_code,
        headers=headers,
    )
