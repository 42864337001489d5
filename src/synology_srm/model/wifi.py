"""Typed shapes for Wi-Fi network profiles."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class WifiRadio(TypedDict):
    """One radio (SSID) inside a Wi-Fi profile.

    The router returns many more security and band settings per radio; they
    are kept as-is so a profile can be written back unchanged.
    """

    ssid: str
    enable: bool
    radio_type: NotRequired[str]


class WifiProfile(TypedDict):
    id: int
    radio_list: list[WifiRadio]
