"""
Gift name extraction from Telegram NFT deep links.

A link looks like ``t.me/nft/Plush-Pepe-12345``: hyphen-joined name tokens
followed by the item's serial number, which is dropped.
"""
import re
from typing import Optional

_NFT_LINK = re.compile(r"t\.me/nft/([A-Za-z0-9]+(?:-[A-Za-z0-9]+)*?)-(\d+)")


def _title_case(text: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def parse_link(text: Optional[str]) -> Optional[str]:
    """
    Return the gift name encoded in a t.me/nft link.

    Args:
        text: User-supplied link, with or without scheme

    Returns:
        Title-cased gift name, or None if the text is not an NFT link
    """
    if not text:
        return None
    match = _NFT_LINK.search(text)
    if not match:
        return None
    return _title_case(match.group(1).replace("-", " "))
