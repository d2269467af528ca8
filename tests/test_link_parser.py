"""Tests for t.me/nft link parsing."""

import pytest

from gridcore.link_parser import parse_link


@pytest.mark.parametrize("text, expected", [
    ("t.me/nft/Plush-Pepe-12345", "Plush Pepe"),
    ("t.me/nft/Durovs-Cap-1", "Durovs Cap"),
    ("https://t.me/nft/santa-hat-42", "Santa Hat"),
    ("t.me/nft/IonGem-7", "IonGem"),
    ("see t.me/nft/Lol-Pop-99 here", "Lol Pop"),
])
def test_recognised_links(text, expected):
    assert parse_link(text) == expected


@pytest.mark.parametrize("text", [
    "not a link",
    "",
    None,
    "t.me/nft/Plush-Pepe",
    "t.me/nft/-123",
    "example.com/nft/Plush-Pepe-1",
    "t.me/addstickers/Plush-Pepe-1",
])
def test_unrecognised_text_returns_none(text):
    assert parse_link(text) is None
