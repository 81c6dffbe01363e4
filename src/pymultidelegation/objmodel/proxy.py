# -*- encoding: utf-8 -*-
# @File   : proxy.py
# @Time   : 2024/11/02 16:40:19
# @Author : Kariko Lin

"""Interception of fundamental operations.

An `InterceptProxy` owns nothing itself: every operation performed on it
is handed to the matching trap of its handler, together with the target.
`TrapHandler` traps forward unchanged, so a subclass only overrides
what it wants to intercept.
"""

from typing import Any

from ..abstract import ObjectModel
from .model import PropertyDescriptor, PropertyKey


class TrapHandler:
    def get_prototype_of(self, target: ObjectModel) -> ObjectModel | None:
        return target.get_prototype_of()

    def set_prototype_of(
        self, target: ObjectModel, prototype: ObjectModel | None
    ) -> bool:
        return target.set_prototype_of(prototype)

    def is_extensible(self, target: ObjectModel) -> bool:
        return target.is_extensible()

    def prevent_extensions(self, target: ObjectModel) -> bool:
        return target.prevent_extensions()

    def get_own_property_descriptor(
        self, target: ObjectModel, key: PropertyKey
    ) -> PropertyDescriptor | None:
        return target.get_own_property_descriptor(key)

    def define_property(
        self, target: ObjectModel, key: PropertyKey, desc: PropertyDescriptor
    ) -> bool:
        return target.define_property(key, desc)

    def has(self, target: ObjectModel, key: PropertyKey) -> bool:
        return target.has_property(key)

    def get(
        self, target: ObjectModel, key: PropertyKey, receiver: ObjectModel
    ) -> Any:
        return target.get_value(key, receiver)

    def set(
        self, target: ObjectModel, key: PropertyKey, value: Any,
        receiver: ObjectModel
    ) -> bool:
        return target.set_value(key, value, receiver)

    def delete_property(self, target: ObjectModel, key: PropertyKey) -> bool:
        return target.delete_property(key)

    def own_keys(self, target: ObjectModel) -> list[PropertyKey]:
        return target.own_keys()


class InterceptProxy(ObjectModel):
    def __init__(self, target: ObjectModel, handler: TrapHandler) -> None:
        self._target = target
        self._handler = handler

    @property
    def proxy_target(self) -> ObjectModel:
        return self._target

    def get_prototype_of(self) -> ObjectModel | None:
        return self._handler.get_prototype_of(self._target)

    def set_prototype_of(self, prototype: ObjectModel | None) -> bool:
        return self._handler.set_prototype_of(self._target, prototype)

    def is_extensible(self) -> bool:
        result = self._handler.is_extensible(self._target)
        if result != self._target.is_extensible():
            raise TypeError(
                'is_extensible trap result does not reflect '
                'extensibility of proxy target')
        return result

    def prevent_extensions(self) -> bool:
        return self._handler.prevent_extensions(self._target)

    def get_own_property_descriptor(
        self, key: PropertyKey
    ) -> PropertyDescriptor | None:
        return self._handler.get_own_property_descriptor(self._target, key)

    def define_property(
        self, key: PropertyKey, desc: PropertyDescriptor
    ) -> bool:
        return self._handler.define_property(self._target, key, desc)

    def has_property(self, key: PropertyKey) -> bool:
        return self._handler.has(self._target, key)

    def get_value(
        self, key: PropertyKey, receiver: ObjectModel | None = None
    ) -> Any:
        return self._handler.get(
            self._target, key, self if receiver is None else receiver)

    def set_value(
        self, key: PropertyKey, value: Any,
        receiver: ObjectModel | None = None
    ) -> bool:
        return self._handler.set(
            self._target, key, value, self if receiver is None else receiver)

    def delete_property(self, key: PropertyKey) -> bool:
        return self._handler.delete_property(self._target, key)

    def own_keys(self) -> list[PropertyKey]:
        return self._handler.own_keys(self._target)

    def __repr__(self) -> str:
        return f'InterceptProxy({self._target!r})'
