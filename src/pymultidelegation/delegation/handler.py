# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/11/03 11:25:02
# @Author : Kariko Lin

"""Traps binding an `InterceptProxy` to the node it wraps.

The handler holds no state. Each trap hands the operation to
`DelegationNode.resolve()`, which decides whether the delegates
take part or not.
"""

from typing import Any

from ..abstract import ObjectModel
from ..consts import Operation
from ..objmodel import PropertyDescriptor, PropertyKey, TrapHandler


class DelegationHandler(TrapHandler):
    # `set_prototype_of` is not trapped, the base class forwards it.

    def get(self, target, key: PropertyKey, receiver: ObjectModel) -> Any:
        return target.resolve(Operation.GET, key, receiver)

    def set(
        self, target, key: PropertyKey, value: Any, receiver: ObjectModel
    ) -> bool:
        return target.resolve(Operation.SET, key, value, receiver)

    def has(self, target, key: PropertyKey) -> bool:
        return target.resolve(Operation.HAS, key)

    def delete_property(self, target, key: PropertyKey) -> bool:
        return target.resolve(Operation.DELETE_PROPERTY, key)

    def define_property(
        self, target, key: PropertyKey, desc: PropertyDescriptor
    ) -> bool:
        return target.resolve(Operation.DEFINE_PROPERTY, key, desc)

    def get_own_property_descriptor(
        self, target, key: PropertyKey
    ) -> PropertyDescriptor | None:
        return target.resolve(Operation.GET_OWN_PROPERTY_DESCRIPTOR, key)

    def own_keys(self, target) -> list[PropertyKey]:
        return target.resolve(Operation.OWN_KEYS)

    def get_prototype_of(self, target) -> ObjectModel | None:
        return target.resolve(Operation.GET_PROTOTYPE_OF)

    def is_extensible(self, target) -> bool:
        return target.resolve(Operation.IS_EXTENSIBLE)

    def prevent_extensions(self, target) -> bool:
        return target.resolve(Operation.PREVENT_EXTENSIONS)
