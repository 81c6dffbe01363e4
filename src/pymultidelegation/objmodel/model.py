# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/02 15:02:44
# @Author : Kariko Lin

"""Basically a prototype object model with one parent per object.

Every object keeps a table of own properties and a single prototype slot.
Lookups missing on an object continue on its prototype,
writes always land on the object the lookup started from (the *receiver*).
"""

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from ..abstract import ObjectModel


class Symbol:
    """A property key that is only ever equal to itself.

    Use it to hide bookkeeping entries from string keyed user data.
    """
    __slots__ = ('description',)

    def __init__(self, description: str = '') -> None:
        self.description = description

    def __repr__(self) -> str:
        return f'Symbol({self.description})'


PropertyKey = str | Symbol


@dataclass(frozen=True)
class PropertyDescriptor:
    value: Any = None
    # accessors get the receiver as their first argument.
    getter: Callable[[Any], Any] | None = None
    setter: Callable[[Any, Any], None] | None = None
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True

    @property
    def is_accessor(self) -> bool:
        return self.getter is not None or self.setter is not None


class ProtoObject(ObjectModel):
    """An ordinary object.

        ```python
        base = ProtoObject(greeting='hello')
        child = ProtoObject(base, name='child')
        child['greeting']        # 'hello', found on base
        child['greeting'] = 'hi'  # own property of child, base untouched
        ```
    """

    def __init__(
        self, prototype: ObjectModel | None = None, /, **props: Any
    ) -> None:
        self._props: dict[PropertyKey, PropertyDescriptor] = {}
        self._proto = prototype
        self._extensible = True
        for k, v in props.items():
            self._props[k] = PropertyDescriptor(value=v)

    def get_prototype_of(self) -> ObjectModel | None:
        return self._proto

    def set_prototype_of(self, prototype: ObjectModel | None) -> bool:
        if prototype is self._proto:
            return True
        if not self._extensible:
            return False
        p = prototype
        while p is not None:
            if p is self:
                return False
            # a proxy may answer anything, so stop looking there.
            if not isinstance(p, ProtoObject):
                break
            p = p.get_prototype_of()
        self._proto = prototype
        return True

    def is_extensible(self) -> bool:
        return self._extensible

    def prevent_extensions(self) -> bool:
        self._extensible = False
        return True

    def get_own_property_descriptor(
        self, key: PropertyKey
    ) -> PropertyDescriptor | None:
        return self._props.get(key)

    def define_property(
        self, key: PropertyKey, desc: PropertyDescriptor
    ) -> bool:
        current = self._props.get(key)
        if current is None:
            if not self._extensible:
                return False
        elif not current.configurable:
            if desc.configurable or desc.enumerable != current.enumerable:
                return False
            if desc.is_accessor != current.is_accessor:
                return False
            if current.is_accessor:
                if (desc.getter is not current.getter
                        or desc.setter is not current.setter):
                    return False
            elif not current.writable and (
                    desc.writable or desc.value != current.value):
                return False
        self._props[key] = desc
        return True

    def has_property(self, key: PropertyKey) -> bool:
        if key in self._props:
            return True
        return self._proto is not None and self._proto.has_property(key)

    def get_value(
        self, key: PropertyKey, receiver: ObjectModel | None = None
    ) -> Any:
        if receiver is None:
            receiver = self
        desc = self._props.get(key)
        if desc is None:
            if self._proto is None:
                raise KeyError(key)
            return self._proto.get_value(key, receiver)
        if desc.is_accessor:
            return None if desc.getter is None else desc.getter(receiver)
        return desc.value

    def set_value(
        self, key: PropertyKey, value: Any,
        receiver: ObjectModel | None = None
    ) -> bool:
        if receiver is None:
            receiver = self
        own = self._props.get(key)
        if own is None:
            if self._proto is not None:
                return self._proto.set_value(key, value, receiver)
            own = PropertyDescriptor()
        if own.is_accessor:
            if own.setter is None:
                return False
            own.setter(receiver, value)
            return True
        if not own.writable:
            return False
        # shall create (or update) on the receiver, never on a parent.
        existing = receiver.get_own_property_descriptor(key)
        if existing is None:
            return receiver.define_property(
                key, PropertyDescriptor(value=value))
        if existing.is_accessor or not existing.writable:
            return False
        return receiver.define_property(key, replace(existing, value=value))

    def delete_property(self, key: PropertyKey) -> bool:
        desc = self._props.get(key)
        if desc is None:
            return True
        if not desc.configurable:
            return False
        del self._props[key]
        return True

    def own_keys(self) -> list[PropertyKey]:
        # strings first, then symbols, each in insertion order.
        return ([k for k in self._props if isinstance(k, str)]
                + [k for k in self._props if isinstance(k, Symbol)])

    def __repr__(self) -> str:
        pairs = ', '.join(
            f'{k}={d.value!r}' for k, d in self._props.items()
            if isinstance(k, str) and not d.is_accessor)
        return f'{type(self).__name__}({pairs})'
