"""Tests for attach_delegates and lookups through the installed node."""

import logging

import pytest

from pymultidelegation import (
    DelegationNode,
    PropertyDescriptor,
    ProtoObject,
    attach_delegates,
    walk_delegates,
)


def _node_of(host):
    return host.get_prototype_of().proxy_target


def test_empty_list_is_a_no_op():
    parent = ProtoObject()
    host = ProtoObject(parent)
    attach_delegates(host, [])
    assert host.get_prototype_of() is parent

    attach_delegates(host, [ProtoObject()])
    before = list(_node_of(host).delegates)
    proto = host.get_prototype_of()
    attach_delegates(host, [])
    assert host.get_prototype_of() is proto
    assert list(_node_of(host).delegates) == before


def test_original_parent_comes_first():
    parent, extra = ProtoObject(), ProtoObject()
    host = ProtoObject(parent)
    attach_delegates(host, [extra])
    assert DelegationNode.instance_of(host.get_prototype_of())
    assert list(_node_of(host).delegates) == [parent, extra]


def test_second_attach_reuses_node():
    parent, d1, d2 = ProtoObject(), ProtoObject(), ProtoObject()
    host = ProtoObject(parent)
    attach_delegates(host, [d1])
    proto = host.get_prototype_of()
    attach_delegates(host, [d2])
    assert host.get_prototype_of() is proto
    assert list(_node_of(host).delegates) == [parent, d1, d2]


def test_host_without_prototype():
    d = ProtoObject()
    host = ProtoObject()
    attach_delegates(host, [d])
    assert list(_node_of(host).delegates) == [d]


def test_circular_and_null_entries_are_filtered():
    parent, d = ProtoObject(), ProtoObject()
    host = ProtoObject(parent)
    attach_delegates(host, [d])
    proxy = host.get_prototype_of()
    attach_delegates(host, [proxy, proxy.proxy_target, None, host, d])
    assert list(_node_of(host).delegates) == [parent, d]


def test_duplicates_are_logged(caplog):
    caplog.set_level(logging.DEBUG)
    d = ProtoObject()
    host = ProtoObject()
    attach_delegates(host, [d, d])
    assert list(_node_of(host).delegates) == [d]
    assert "duplicate" in caplog.text


def test_non_extensible_host_raises():
    host = ProtoObject()
    host.prevent_extensions()
    with pytest.raises(TypeError):
        attach_delegates(host, [ProtoObject()])


def test_first_match_in_order_wins():
    d1, d2 = ProtoObject(), ProtoObject(k=7)
    host = ProtoObject(d1)
    attach_delegates(host, [d2])
    assert host["k"] == 7
    d1["k"] = 3
    assert host["k"] == 3


def test_original_chain_still_resolves():
    grand = ProtoObject(old="value")
    host = ProtoObject(ProtoObject(grand))
    attach_delegates(host, [ProtoObject(new="value")])
    assert host["old"] == "value"
    assert host["new"] == "value"
    assert "old" in host and "new" in host


def test_missing_key():
    host = ProtoObject()
    attach_delegates(host, [ProtoObject()])
    with pytest.raises(KeyError):
        host["missing"]
    assert host.get("missing", "default") == "default"
    assert "missing" not in host


def test_writes_land_on_host():
    d1, d2 = ProtoObject(), ProtoObject(k=7)
    host = ProtoObject(d1)
    attach_delegates(host, [d2])
    host["k"] = 9
    host["fresh"] = 1
    assert host.get_own_property_descriptor("k").value == 9
    assert d2["k"] == 7
    assert "fresh" not in d1 and "fresh" not in d2


def test_accessor_on_delegate_sees_host():
    d = ProtoObject()
    d.define_property("label", PropertyDescriptor(
        getter=lambda r: f"<{r['name']}>"))
    host = ProtoObject(name="host")
    attach_delegates(host, [d])
    assert host["label"] == "<host>"


def test_enumeration_excludes_delegate_keys():
    host = ProtoObject(ProtoObject(inherited=1), own=1)
    attach_delegates(host, [ProtoObject(extra=1)])
    assert list(host) == ["own"]
    assert host.get_prototype_of().own_keys() == \
        _node_of(host).own_keys()
    assert not any(
        isinstance(k, str) for k in host.get_prototype_of().own_keys())


def test_delete_is_not_distributed():
    d = ProtoObject(k=7)
    host = ProtoObject()
    attach_delegates(host, [d])
    proxy = host.get_prototype_of()
    assert proxy.delete_property("k")
    assert d["k"] == 7
    with pytest.raises(KeyError):
        del host["k"]


def test_describe_reports_delegate_property_as_configurable():
    d = ProtoObject()
    d.define_property("pinned", PropertyDescriptor(value=1, configurable=False))
    host = ProtoObject()
    attach_delegates(host, [d])
    desc = host.get_prototype_of().get_own_property_descriptor("pinned")
    assert desc.value == 1
    assert desc.configurable
    assert host.get_prototype_of().get_own_property_descriptor("nope") is None


def test_nested_hosts_resolve_transitively():
    inner = ProtoObject()
    attach_delegates(inner, [ProtoObject(deep=1)])
    outer = ProtoObject()
    attach_delegates(outer, [ProtoObject(), inner])
    assert outer["deep"] == 1


def test_walk_delegates_in_lookup_order():
    grand, d1, d2 = ProtoObject(), ProtoObject(), ProtoObject()
    parent = ProtoObject(grand)
    host = ProtoObject(parent)
    attach_delegates(host, [d1, d2])
    assert list(walk_delegates(host)) == [parent, grand, d1, d2]


def test_walk_delegates_visits_shared_ancestor_once():
    base = ProtoObject()
    left, right = ProtoObject(base), ProtoObject(base)
    host = ProtoObject(left)
    attach_delegates(host, [right])
    assert list(walk_delegates(host)) == [left, base, right]


def test_attach_single_object():
    parent, mixin = ProtoObject(), ProtoObject(k=1, j=2)
    host = ProtoObject(parent)
    attach_delegates(host, mixin)
    assert list(_node_of(host).delegates) == [parent, mixin]
    assert host["k"] == 1


def test_attach_from_generator():
    d1, d2 = ProtoObject(), ProtoObject()
    host = ProtoObject()
    attach_delegates(host, (i for i in (d1, d2)))
    assert list(_node_of(host).delegates) == [d1, d2]
