"""Unit tests for Smart WAN validation, writes and interface switching."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import parse_qsl

import pytest
import responses as responses_lib

from synology_srm.client.errors import SRMApiError, SRMValidationError
from synology_srm.client.session import SRMSession
from synology_srm.client.smartwan_ops import (
    get_smart_wan,
    get_smart_wan_gateway,
    set_smart_wan,
    switch_smart_wan,
    validate_smart_wan,
)
from synology_srm.model.config import SRMClientConfig

_BASE = "http://localhost:8000"
_ENTRY = f"{_BASE}/webapi/entry.cgi"

_CONFIG: dict[str, Any] = {
    "smartwan_mode": "failover",
    "dw_weight_ratio": 0,
    "smartwan_ifname_1": "wan",
    "smartwan_ifname_2": "lan1",
    "smartwan_failback": True,
}


def _session() -> SRMSession:
    return SRMSession(SRMClientConfig(_BASE), sid="0123456789abcdef")


def _reply(data: object) -> None:
    responses_lib.add(
        responses_lib.POST,
        _ENTRY,
        body=json.dumps({"success": True, "data": data}),
        content_type="application/json",
    )


def _with(**overrides: Any) -> dict[str, Any]:
    config = dict(_CONFIG)
    config.update(overrides)
    return config


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------

@responses_lib.activate
def test_get_gateways_unwraps_list() -> None:
    gateways = [{"displayname": "WAN", "ifname": "eth0", "netstatus": "enabled"}]
    _reply({"list": gateways})
    assert get_smart_wan_gateway(_session()) == gateways
    assert responses_lib.calls[0].request.body == (
        "api=SYNO.Core.Network.SmartWAN.Gateway&method=list&version=1"
        "&gatewaytype=%22ipv4%22"
    )


@responses_lib.activate
def test_get_smart_wan() -> None:
    _reply(_CONFIG)
    assert get_smart_wan(_session()) == _CONFIG
    assert dict(parse_qsl(responses_lib.calls[0].request.body)) == {
        "api": "SYNO.Core.Network.SmartWAN.General",
        "method": "get",
        "version": "1",
    }


# ---------------------------------------------------------------------------
# Validation — nothing may be sent
# ---------------------------------------------------------------------------

class TestValidation:
    @pytest.mark.parametrize(
        ("config", "field"),
        [
            (None, "config"),
            ("failover", "config"),
            (_with(dw_weight_ratio=-1), "dw_weight_ratio"),
            (_with(dw_weight_ratio=101), "dw_weight_ratio"),
            (_with(dw_weight_ratio="50"), "dw_weight_ratio"),
            (_with(dw_weight_ratio=True), "dw_weight_ratio"),
            ({k: v for k, v in _CONFIG.items() if k != "dw_weight_ratio"}, "dw_weight_ratio"),
            (_with(smartwan_ifname_1="eth0"), "smartwan_ifname_1"),
            (_with(smartwan_ifname_2=None), "smartwan_ifname_2"),
            (_with(smartwan_mode="loadbalancing"), "smartwan_mode"),
        ],
    )
    @responses_lib.activate
    def test_rejected_without_request(self, config: Any, field: str) -> None:
        with pytest.raises(SRMValidationError) as exc_info:
            set_smart_wan(_session(), config)
        assert exc_info.value.field == field
        assert len(responses_lib.calls) == 0

    def test_messages_name_the_field(self) -> None:
        with pytest.raises(SRMValidationError, match="Invalid smartwan_mode"):
            validate_smart_wan(_with(smartwan_mode="x"))
        with pytest.raises(SRMValidationError, match="Invalid WAN config"):
            validate_smart_wan([])

    @pytest.mark.parametrize("ratio", [0, 50, 100, 33.5])
    def test_ratio_bounds_accepted(self, ratio: float) -> None:
        validate_smart_wan(_with(dw_weight_ratio=ratio, smartwan_mode="loadbalancing_failover"))

    @pytest.mark.parametrize("ifname", ["3glte", "PPPoE-WAN", "vpn", "wifi5g", "DS-Lite", "MapE"])
    def test_interfaces_accepted(self, ifname: str) -> None:
        validate_smart_wan(_with(smartwan_ifname_2=ifname))


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------

@responses_lib.activate
def test_set_smart_wan_sends_config_and_returns_echo() -> None:
    _reply(_CONFIG)
    assert set_smart_wan(_session(), _CONFIG) == _CONFIG
    assert responses_lib.calls[0].request.body == (
        "api=SYNO.Core.Network.SmartWAN.General&method=set&version=1"
        "&smartwan_mode=failover&dw_weight_ratio=0&smartwan_ifname_1=wan"
        "&smartwan_ifname_2=lan1&smartwan_failback=true"
    )


@responses_lib.activate
def test_switch_smart_wan_swaps_interfaces() -> None:
    _reply(_CONFIG)
    swapped = _with(smartwan_ifname_1="lan1", smartwan_ifname_2="wan")
    _reply(swapped)

    result = switch_smart_wan(_session())

    assert result == swapped
    assert len(responses_lib.calls) == 2
    sent = dict(parse_qsl(responses_lib.calls[1].request.body))
    assert sent["method"] == "set"
    assert sent["smartwan_ifname_1"] == "lan1"
    assert sent["smartwan_ifname_2"] == "wan"
    assert sent["smartwan_mode"] == "failover"


@responses_lib.activate
def test_switch_smart_wan_write_failure_propagates() -> None:
    _reply(_CONFIG)
    responses_lib.add(
        responses_lib.POST,
        _ENTRY,
        body=json.dumps({"success": False, "error": {"code": 105}}),
    )
    with pytest.raises(SRMApiError, match="Insufficient user privilege"):
        switch_smart_wan(_session())
