"""
DOM field readers for job detail pages.
"""

import logging
from typing import Sequence, Tuple

from playwright.async_api import Page

logger = logging.getLogger(__name__)

# Node name that marks a single container holding the whole list as text
CONTAINER_NODE = "DIV"


def flatten_node_texts(nodes: Sequence[Tuple[str, str]]) -> str:
    """
    Flatten matched nodes given as (node_name, text) pairs.

    A container first node yields its own text; anything else is joined
    with ", ".
    """
    if not nodes:
        return ""

    first_name, first_text = nodes[0]
    if first_name.upper() == CONTAINER_NODE:
        return (first_text or "").strip()

    return ", ".join((text or "").strip() for _, text in nodes)


async def read_text(page: Page, selector: str) -> str:
    """
    Inner text of the first element matching *selector*, or "".
    """
    loc = page.locator(selector)
    if await loc.count() == 0:
        return ""
    text = await loc.first.inner_text()
    return text.strip() if text else ""


async def read_list(page: Page, selector: str) -> str:
    """
    Flattened inner text of every element matching *selector*, or "".
    """
    nodes = await page.eval_on_selector_all(
        selector, "nodes => nodes.map(node => [node.nodeName, node.innerText])"
    )
    return flatten_node_texts([(name, text) for name, text in nodes])
