"""Tests for the flat-relay and nested-proxy builders."""

import pytest

from sshhop.builders import FlatRelayBuilder, NestedProxyBuilder, get_builder
from sshhop.resolver import resolve
from sshhop.types import Address, Direct, HopChain, Nested, NestedPlan, RelaySpec, depth


def make_chain(n: int) -> HopChain:
    hops = tuple(Address(host=f"gw{i}") for i in range(1, n + 1))
    return HopChain(hops=hops, destination_host="10.0.0.5", destination_port=22)


class TestFlatRelayBuilder:
    def test_split_for_any_length(self):
        builder = FlatRelayBuilder()
        for n in range(1, 6):
            chain = make_chain(n)
            spec = builder.build(chain)
            assert spec.final_hop == chain.hops[n - 1]
            assert spec.intermediate == chain.hops[: n - 1]
            assert len(spec.intermediate) == n - 1

    def test_single_hop_has_no_relays(self):
        chain = resolve(["-J", "bastion@gw1.example.net", "10.0.0.5", "2222"])
        spec = FlatRelayBuilder().build(chain)
        assert spec == RelaySpec(
            intermediate=(),
            final_hop=Address(host="gw1.example.net", user="bastion"),
            destination_host="10.0.0.5",
            destination_port=2222,
        )

    def test_two_hops(self):
        chain = resolve(["-J", "u@gw1", "-J", "u@gw2:2222", "10.0.0.5", "22"])
        spec = FlatRelayBuilder().build(chain)
        assert spec.intermediate == (Address(host="gw1", user="u"),)
        assert spec.final_hop == Address(host="gw2", port=2222, user="u")
        assert (spec.destination_host, spec.destination_port) == ("10.0.0.5", 22)


class TestNestedProxyBuilder:
    def test_single_hop_has_no_proxy(self):
        plan = NestedProxyBuilder().build(make_chain(1))
        assert plan.proxy is None
        assert plan.final_hop == Address(host="gw1")

    def test_nesting_depth(self):
        builder = NestedProxyBuilder()
        for n in range(2, 7):
            chain = make_chain(n)
            plan = builder.build(chain)
            assert depth(plan.proxy) == n - 1
            assert plan.final_hop == chain.hops[n - 1]

    def test_two_hops(self):
        chain = resolve(["-J", "u@gw1", "-J", "u@gw2:2222", "10.0.0.5", "22"])
        plan = NestedProxyBuilder().build(chain)
        assert plan == NestedPlan(
            proxy=Direct(hop=Address(host="gw1", user="u")),
            final_hop=Address(host="gw2", port=2222, user="u"),
            destination_host="10.0.0.5",
            destination_port=22,
        )

    def test_built_bottom_up(self):
        plan = NestedProxyBuilder().build(make_chain(4))
        assert plan.proxy == Nested(
            proxy=Nested(proxy=Direct(hop=Address(host="gw1")), hop=Address(host="gw2")),
            hop=Address(host="gw3"),
        )

    def test_accepts_single_destination_token(self):
        assert NestedProxyBuilder.allow_single_destination is True
        assert FlatRelayBuilder.allow_single_destination is False


class TestGetBuilder:
    def test_known_dialects(self):
        assert isinstance(get_builder("flat"), FlatRelayBuilder)
        assert isinstance(get_builder("nested"), NestedProxyBuilder)

    def test_unknown_dialect(self):
        with pytest.raises(ValueError, match="Unknown dialect"):
            get_builder("spiral")


class TestDepth:
    def test_none(self):
        assert depth(None) == 0

    def test_direct(self):
        assert depth(Direct(hop=Address(host="gw1"))) == 1
