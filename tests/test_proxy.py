"""Tests for InterceptProxy and the forwarding TrapHandler."""

import pytest

from pymultidelegation import InterceptProxy, ProtoObject, TrapHandler


def test_default_handler_forwards_reads_and_writes():
    target = ProtoObject(a=1)
    proxy = InterceptProxy(target, TrapHandler())
    assert proxy["a"] == 1
    proxy["b"] = 2
    assert target["b"] == 2
    assert "b" in proxy
    assert proxy.own_keys() == ["a", "b"]
    assert proxy.proxy_target is target


def test_proxy_as_prototype():
    parent = InterceptProxy(ProtoObject(a=1), TrapHandler())
    child = ProtoObject(parent)
    assert child["a"] == 1
    child["a"] = 2
    assert child.get_own_property_descriptor("a").value == 2
    assert parent["a"] == 1


def test_overridden_trap():
    class Upper(TrapHandler):
        def get(self, target, key, receiver):
            return str(target.get_value(key, receiver)).upper()

    proxy = InterceptProxy(ProtoObject(word="hey"), Upper())
    assert proxy["word"] == "HEY"


def test_get_passes_receiver():
    seen = []

    class Spy(TrapHandler):
        def get(self, target, key, receiver):
            seen.append(receiver)
            return super().get(target, key, receiver)

    proxy = InterceptProxy(ProtoObject(a=1), Spy())
    child = ProtoObject(proxy)
    assert child["a"] == 1
    assert proxy["a"] == 1
    assert seen == [child, proxy]


def test_is_extensible_must_match_target():
    class Liar(TrapHandler):
        def is_extensible(self, target):
            return False

    proxy = InterceptProxy(ProtoObject(), Liar())
    with pytest.raises(TypeError):
        proxy.is_extensible()


def test_prevent_extensions_forwarded():
    target = ProtoObject()
    proxy = InterceptProxy(target, TrapHandler())
    assert proxy.is_extensible()
    assert proxy.prevent_extensions()
    assert not target.is_extensible()
    assert not proxy.is_extensible()
