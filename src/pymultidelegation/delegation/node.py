# -*- encoding: utf-8 -*-
# @File   : node.py
# @Time   : 2024/11/03 10:20:47
# @Author : Kariko Lin

"""Multiple delegation on top of a single-parent object model.

A host object keeps its one prototype slot, but the slot is pointed at
a proxy around a `DelegationNode`. Lookups falling through the host reach
the proxy, and the node fans them out across its delegates in order:

    ```python
    base, mixin = ProtoObject(a=1), ProtoObject(b=2)
    host = ProtoObject(base)
    attach_delegates(host, [mixin])
    host['a'], host['b']  # (1, 2)
    ```

Only reads fan out. Writes land on the host as usual,
and shape queries (keys, prototype, extensibility) stay on the node.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace
from typing import Any, NamedTuple
from warnings import warn

import yaml

from ..abstract import ObjectModel
from ..consts import METADATA_TYPE, DropReason, Operation
from ..objmodel import (
    InterceptProxy,
    PropertyDescriptor,
    PropertyKey,
    ProtoObject
)
from .handler import DelegationHandler
from .keys import KEYS


def _unwrap(candidate: Any) -> Any:
    """Peel off one proxy level, if any."""
    if isinstance(candidate, InterceptProxy):
        return candidate.proxy_target
    return candidate


def _as_delegates(delegates: Any) -> list[Any]:
    """Normalize one delegate, or any iterable of them, to a list."""
    # objects are mappings too, so check them before iterating.
    if (delegates is None or isinstance(delegates, (ObjectModel, str))
            or not isinstance(delegates, Iterable)):
        return [delegates]
    return list(delegates)


def _describe_along_chain(
    obj: ObjectModel | None, key: PropertyKey
) -> PropertyDescriptor | None:
    while obj is not None:
        desc = obj.get_own_property_descriptor(key)
        if desc is not None:
            return desc
        obj = obj.get_prototype_of()
    return None


class DelegateList(Sequence[ObjectModel]):
    """Ordered set of delegates, compared by identity.

    The first occurrence of an object keeps its position,
    so re-adding a delegate never changes lookup priority.
    """

    def __init__(self, owner: ObjectModel | None = None) -> None:
        self._owner = owner
        self._items: list[ObjectModel] = []
        # ids stay valid, as `_items` keeps every member alive.
        self._ids: set[int] = set()

    def _check(self, item: Any) -> DropReason | None:
        if item is None:
            return DropReason.NULL
        if not isinstance(item, ObjectModel):
            return DropReason.NOT_AN_OBJECT
        if self._owner is not None and _unwrap(item) is self._owner:
            return DropReason.SELF_REFERENCE
        if id(item) in self._ids:
            return DropReason.DUPLICATE
        return None

    def merge(self, items: Iterable[Any]) -> list[tuple[Any, DropReason]]:
        """Append `items` not already present. Returns what got dropped."""
        dropped = []
        for item in items:
            reason = self._check(item)
            if reason is not None:
                dropped.append((item, reason))
                continue
            self._items.append(item)
            self._ids.add(id(item))
        return dropped

    def __getitem__(
        self, index: int | slice
    ) -> ObjectModel | list[ObjectModel]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ObjectModel]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return id(item) in self._ids

    def __repr__(self) -> str:
        return f'DelegateList({self._items!r})'


class NodeMetadata:
    """Debug-only record of a node. `delegates` is a live view."""

    def __init__(self, node: 'DelegationNode') -> None:
        self._node = node
        self.type = METADATA_TYPE

    @property
    def delegates(self) -> DelegateList:
        return self._node.delegates

    def dump(self) -> str:
        """Render as a YAML document, e.g. for log output."""
        return yaml.safe_dump(
            {
                'type': self.type,
                'delegates': [repr(i) for i in self.delegates],
            },
            sort_keys=False, allow_unicode=True)

    def __repr__(self) -> str:
        return f'<{self.type}: {len(self.delegates)} delegate(s)>'


class NodeHandle(NamedTuple):
    proxy: InterceptProxy
    target: 'DelegationNode'


class DelegationNode(ProtoObject):
    """The intermediary installed as prototype of a host object.

    Never hand the raw node to a host. Use `create()` and install
    `handle.proxy`, so lookups get intercepted; the node itself works
    on its own storage only.
    """

    _RESOLVERS = {
        Operation.GET: '_resolve_get',
        Operation.SET: '_resolve_set',
        Operation.HAS: '_resolve_has',
        Operation.DELETE_PROPERTY: '_resolve_delete',
        Operation.DEFINE_PROPERTY: '_resolve_define',
        Operation.GET_OWN_PROPERTY_DESCRIPTOR: '_resolve_describe',
        Operation.OWN_KEYS: 'own_keys',
        Operation.GET_PROTOTYPE_OF: 'get_prototype_of',
        Operation.IS_EXTENSIBLE: 'is_extensible',
        Operation.PREVENT_EXTENSIONS: 'prevent_extensions',
    }

    def __init__(self, delegates: Any = ()) -> None:
        super().__init__()
        self.define_property(KEYS.delegates, PropertyDescriptor(
            value=DelegateList(self), enumerable=False))
        self.define_property(KEYS.target, PropertyDescriptor(
            value=self, enumerable=False))
        self.define_property(KEYS.metadata, PropertyDescriptor(
            value=NodeMetadata(self), enumerable=False))
        self.merge_delegates(delegates)

    @classmethod
    def create(cls, delegates: Any = ()) -> NodeHandle:
        """Allocate a node together with the proxy wrapping it."""
        node = cls(delegates)
        return NodeHandle(InterceptProxy(node, DelegationHandler()), node)

    @classmethod
    def instance_of(cls, candidate: Any) -> bool:
        """Whether `candidate` is a node, raw or behind one proxy.

        Note: it's a one-hop check. Neither a host whose prototype is
        a node, nor a subclass instance counts. To find nodes further up,
        go through `walk_delegates()`.
        """
        return type(_unwrap(candidate)) is cls

    @property
    def delegates(self) -> DelegateList:
        return self.get_own_property_descriptor(KEYS.delegates).value

    @property
    def metadata(self) -> NodeMetadata:
        return self.get_own_property_descriptor(KEYS.metadata).value

    def merge_delegates(self, delegates: Any) -> list[tuple[Any, DropReason]]:
        dropped = self.delegates.merge(_as_delegates(delegates))
        for item, reason in dropped:
            logging.debug(f'{self.metadata!r} dropped {item!r} ({reason.value})')
            if reason is DropReason.NOT_AN_OBJECT:
                warn(f'{item!r} is not an object, ignored as a delegate.')
        return dropped

    def resolve(self, operation: Operation, *args: Any) -> Any:
        return getattr(self, self._RESOLVERS[operation])(*args)

    def _resolve_get(self, key: PropertyKey, receiver: ObjectModel) -> Any:
        if self.has_property(key):
            return self.get_value(key, receiver)
        for delegate in self.delegates:
            if delegate.has_property(key):
                # receiver stays the host, so accessors see it.
                return delegate.get_value(key, receiver)
        raise KeyError(key)

    def _resolve_set(
        self, key: PropertyKey, value: Any, receiver: ObjectModel
    ) -> bool:
        return self.set_value(key, value, receiver)

    def _resolve_has(self, key: PropertyKey) -> bool:
        return self.has_property(key) or any(
            delegate.has_property(key) for delegate in self.delegates)

    def _resolve_delete(self, key: PropertyKey) -> bool:
        return self.delete_property(key)

    def _resolve_define(
        self, key: PropertyKey, desc: PropertyDescriptor
    ) -> bool:
        return self.define_property(key, desc)

    def _resolve_describe(
        self, key: PropertyKey
    ) -> PropertyDescriptor | None:
        desc = self.get_own_property_descriptor(key)
        if desc is not None:
            return desc
        for delegate in self.delegates:
            desc = _describe_along_chain(delegate, key)
            if desc is not None:
                # the node's storage doesn't own it, so it can't be pinned.
                return replace(desc, configurable=True)
        return None

    def __repr__(self) -> str:
        return f'DelegationNode({list(self.delegates)!r})'


def attach_delegates(host: ObjectModel, delegates: Any = ()) -> None:
    """Give `host` extra parents, after the one it already has.

    The first call installs a node as the host's prototype, later calls
    merge into that same node. `None`, duplicates and circular entries
    are silently left out. A single object counts as a one-item list.
    """
    delegates = _as_delegates(delegates)
    if not delegates:
        return
    current = host.get_prototype_of()
    delegates.insert(0, current)

    if not DelegationNode.instance_of(current):
        proxy, _ = DelegationNode.create()
        if not host.set_prototype_of(proxy):
            raise TypeError(f'{host!r} refused a new prototype')
        logging.debug(f'installed delegation node on {host!r}')

    node = host.get_prototype_of()
    raw = _unwrap(node)
    delegates = [
        i for i in delegates
        if i is not None and i is not node and i is not raw and i is not host
    ]
    raw.merge_delegates(delegates)


def walk_delegates(obj: ObjectModel) -> Iterator[ObjectModel]:
    """Every ancestor of `obj` in lookup order, depth first, each once.

    Nodes aren't yielded themselves; their delegates are, in place.
    """
    seen: set[int] = set()
    stack = [obj.get_prototype_of()]
    while stack:
        i = stack.pop()
        if i is None or id(i) in seen:
            continue
        seen.add(id(i))
        if DelegationNode.instance_of(i):
            node = _unwrap(i)
            stack.extend(reversed(node.delegates))
            # the node's own chain comes before its delegates.
            stack.append(node.get_prototype_of())
            continue
        yield i
        stack.append(i.get_prototype_of())


def debug_bookkeeping_keys() -> list[PropertyKey]:
    """Own keys of a fresh node's storage. Used by tests only."""
    _, node = DelegationNode.create()
    return node.own_keys()
