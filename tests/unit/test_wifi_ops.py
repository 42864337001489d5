"""Unit tests for Wi-Fi profile reads, writes and radio toggling."""

from __future__ import annotations

import json
from urllib.parse import parse_qsl

import pytest
import responses as responses_lib

from synology_srm.client.errors import SRMNotFoundError, SRMValidationError
from synology_srm.client.session import SRMSession
from synology_srm.client.wifi_ops import get_wifi_settings, set_wifi_settings, switch_wifi_radio
from synology_srm.model.config import SRMClientConfig

_BASE = "http://localhost:8000"
_ENTRY = f"{_BASE}/webapi/entry.cgi"

_PROFILES = [
    {"id": 0, "radio_list": [{"ssid": "MyPrimary", "enable": True, "radio_type": "SmartConnect"}]},
    {"id": 1, "radio_list": [{"ssid": "MyGuest", "enable": False, "radio_type": "SmartConnect"}]},
]


def _session() -> SRMSession:
    return SRMSession(SRMClientConfig(_BASE), sid="0123456789abcdef")


def _add_profiles(profiles: list[dict[str, object]] = _PROFILES) -> None:
    responses_lib.add(
        responses_lib.POST,
        _ENTRY,
        body=json.dumps({"success": True, "data": {"profiles": profiles}}),
    )


def _add_ok() -> None:
    responses_lib.add(responses_lib.POST, _ENTRY, body=json.dumps({"success": True}))


@responses_lib.activate
def test_get_wifi_settings() -> None:
    _add_profiles()
    assert get_wifi_settings(_session()) == _PROFILES
    assert responses_lib.calls[0].request.body == (
        "api=SYNO.Wifi.Network.Setting&method=get&version=1"
    )


@responses_lib.activate
def test_set_wifi_settings_wire_format() -> None:
    _add_ok()
    assert set_wifi_settings(_session(), _PROFILES) is None
    assert responses_lib.calls[0].request.body == (
        "api=SYNO.Wifi.Network.Setting&method=set&version=1&profiles="
        "%5B%7B%22id%22%3A0%2C%22radio_list%22%3A%5B%7B%22ssid%22%3A%22MyPrimary%22"
        "%2C%22enable%22%3Atrue%2C%22radio_type%22%3A%22SmartConnect%22%7D%5D%7D%2C"
        "%7B%22id%22%3A1%2C%22radio_list%22%3A%5B%7B%22ssid%22%3A%22MyGuest%22"
        "%2C%22enable%22%3Afalse%2C%22radio_type%22%3A%22SmartConnect%22%7D%5D%7D%5D"
    )


class TestSwitchWifiRadio:
    @pytest.mark.parametrize("ssid", [None, ""])
    @responses_lib.activate
    def test_ssid_required(self, ssid: str | None) -> None:
        with pytest.raises(SRMValidationError, match="You must provide the network SSID"):
            switch_wifi_radio(_session(), ssid)
        assert len(responses_lib.calls) == 0

    @responses_lib.activate
    def test_unknown_ssid(self) -> None:
        _add_profiles()
        with pytest.raises(SRMNotFoundError, match="The SSID provided was not found"):
            switch_wifi_radio(_session(), "DummySsid")
        assert len(responses_lib.calls) == 1

    @responses_lib.activate
    def test_toggles_only_matching_profile(self) -> None:
        _add_profiles()
        _add_ok()

        assert switch_wifi_radio(_session(), "MyGuest") is None

        assert len(responses_lib.calls) == 2
        assert responses_lib.calls[1].request.body == (
            "api=SYNO.Wifi.Network.Setting&method=set&version=1&profiles="
            "%5B%7B%22id%22%3A1%2C%22radio_list%22%3A%5B%7B%22ssid%22%3A%22MyGuest%22"
            "%2C%22enable%22%3Atrue%2C%22radio_type%22%3A%22SmartConnect%22%7D%5D%7D%5D"
        )

    @responses_lib.activate
    def test_flips_every_matching_radio_in_first_profile_only(self) -> None:
        profiles = [
            {"id": 0, "radio_list": [{"ssid": "Home", "enable": True}]},
            {
                "id": 1,
                "radio_list": [
                    {"ssid": "Shared", "enable": True, "band": "2.4G"},
                    {"ssid": "Other", "enable": True},
                    {"ssid": "Shared", "enable": False, "band": "5G"},
                ],
            },
            {"id": 2, "radio_list": [{"ssid": "Shared", "enable": True}]},
        ]
        _add_profiles(profiles)
        _add_ok()

        switch_wifi_radio(_session(), "Shared")

        sent = dict(parse_qsl(responses_lib.calls[1].request.body))
        written = json.loads(sent["profiles"])
        assert written == [
            {
                "id": 1,
                "radio_list": [
                    {"ssid": "Shared", "enable": False, "band": "2.4G"},
                    {"ssid": "Other", "enable": True},
                    {"ssid": "Shared", "enable": True, "band": "5G"},
                ],
            }
        ]
