"""
Placeholder page content exposed to examples as WIREFRAME.

Scroll-behaviour examples need something tall to scroll past; the wireframe
is a segment of placeholder paragraph images separated by dividers.
"""

from __future__ import annotations

from typing import Any

from playground.kernel.elements import create_element
from playground.kernel.runtime import undefined
from playground.library.ui import Divider, Image, Segment

CENTERED_PARAGRAPH = "/images/wireframe/centered-paragraph.png"
SHORT_PARAGRAPH = "/images/wireframe/short-paragraph.png"
PARAGRAPH = "/images/wireframe/paragraph.png"
MEDIA_PARAGRAPH = "/images/wireframe/media-paragraph.png"

SECTIONS = (CENTERED_PARAGRAPH, SHORT_PARAGRAPH, PARAGRAPH, MEDIA_PARAGRAPH, PARAGRAPH, PARAGRAPH)


def Wireframe(props: Any = undefined, *_: Any) -> Any:
    children: list[Any] = []
    for position, src in enumerate(SECTIONS):
        if position:
            children.append(create_element(Divider, None))
        children.append(create_element(Image, {"src": src}))
    return create_element(Segment, None, *children)
