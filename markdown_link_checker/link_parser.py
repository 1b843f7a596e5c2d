"""
Extraction of http(s) link targets from Markdown text.
"""

import logging
import re
from typing import List

# Inline links only: [label](http://... or https://...). The destination stops
# at whitespace or the first ")" and must be closed right there.
LINK_PATTERN = re.compile(r'\[[^\]]+\]\((https?://[^\s)]+)\)')

logger = logging.getLogger(__name__)


def extract_links(text: str) -> List[str]:
    """Extract the unique link targets referenced by a Markdown document.

    Args:
        text: Raw document content

    Returns:
        URLs in the order they first appear, each listed once
    """
    found = LINK_PATTERN.findall(text)
    links = list(dict.fromkeys(found))

    logger.debug(
        f"Extracted {len(links)} unique links from {len(found)} occurrences",
        extra={"occurrences": len(found), "unique": len(links)},
    )
    return links
