# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2024/11/02 14:08:51
# @Author : Kariko Lin

"""Fundamental operations every object of the host model answers to.

The `MutableMapping` surface is only sugar over those operations,
so proxies and ordinary objects behave the same from the outside.
"""

from abc import ABCMeta, abstractmethod
from collections.abc import Iterator, MutableMapping
from typing import Any, Generic, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .objmodel.model import PropertyDescriptor, PropertyKey


class ObjectModel(MutableMapping[Any, Any], metaclass=ABCMeta):
    # objects are compared by identity, never by content.
    __eq__ = object.__eq__
    __hash__ = object.__hash__

    @abstractmethod
    def get_prototype_of(self) -> 'ObjectModel | None':
        raise NotImplementedError

    @abstractmethod
    def set_prototype_of(self, prototype: 'ObjectModel | None') -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_extensible(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def prevent_extensions(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_own_property_descriptor(
        self, key: 'PropertyKey'
    ) -> 'PropertyDescriptor | None':
        raise NotImplementedError

    @abstractmethod
    def define_property(
        self, key: 'PropertyKey', desc: 'PropertyDescriptor'
    ) -> bool:
        raise NotImplementedError

    @abstractmethod
    def has_property(self, key: 'PropertyKey') -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_value(
        self, key: 'PropertyKey', receiver: 'ObjectModel | None' = None
    ) -> Any:
        """Raises `KeyError` when no object along the chain has `key`."""
        raise NotImplementedError

    @abstractmethod
    def set_value(
        self, key: 'PropertyKey', value: Any,
        receiver: 'ObjectModel | None' = None
    ) -> bool:
        raise NotImplementedError

    @abstractmethod
    def delete_property(self, key: 'PropertyKey') -> bool:
        raise NotImplementedError

    @abstractmethod
    def own_keys(self) -> list['PropertyKey']:
        raise NotImplementedError

    def __bool__(self) -> bool:
        return True

    def __getitem__(self, key: 'PropertyKey') -> Any:
        return self.get_value(key, self)

    def __setitem__(self, key: 'PropertyKey', value: Any) -> None:
        if not self.set_value(key, value, self):
            raise TypeError(f'cannot assign to read-only property {key!r}')

    def __delitem__(self, key: 'PropertyKey') -> None:
        if self.get_own_property_descriptor(key) is None:
            raise KeyError(key)
        if not self.delete_property(key):
            raise TypeError(f'cannot delete non-configurable property {key!r}')

    def __contains__(self, key: object) -> bool:
        return self.has_property(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:
        """Enumerable string keys along the whole prototype chain,
        nearest first. Shadowed keys show up once."""
        seen: set[str] = set()
        obj: ObjectModel | None = self
        while obj is not None:
            for key in obj.own_keys():
                if not isinstance(key, str) or key in seen:
                    continue
                seen.add(key)
                desc = obj.get_own_property_descriptor(key)
                if desc is not None and desc.enumerable:
                    yield key
            obj = obj.get_prototype_of()

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def to_dict(self) -> dict[str, Any]:
        """Flatten the chain into a plain dict of enumerable properties."""
        return {k: self[k] for k in self}


T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    def __init__(self, filename: str) -> None:
        self._fn = filename

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
