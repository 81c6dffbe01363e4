# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/05 21:47:13
# @Author : Kariko Lin

"""Named object graphs with multiple inheritance.

As for reading and writing files, just see `graph.parser`.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, TypedDict
from warnings import warn

from ..abstract import ObjectModel
from ..delegation import DelegationNode, attach_delegates, walk_delegates
from ..objmodel import ProtoObject


class ObjectMeta(TypedDict):
    name: str
    props: dict[str, Any]
    parents: list[str] | None


class ObjectGraph(MutableMapping[str, ObjectModel]):
    """A set of named objects, each may declare more than one parent:

        ```yaml
        base:
          greeting: hello
        mixin:
          colour: red
        child:
          $inherits: [base, mixin]  # or "base, mixin"
        ```

    Declared parents only take effect after `self.link()`,
    so an object may name parents declared after it.
    Add or remove parents through the `self.inherits` dict,
    then call `self.link()` again.
    """

    def __init__(self) -> None:
        self.__objects: dict[str, ObjectModel] = {}
        self.__inherits: dict[str, list[str]] = {}
        # prototypes objects had before their first link.
        self.__bases: dict[str, ObjectModel | None] = {}

    @property
    def inherits(self) -> dict[str, list[str]]:
        return self.__inherits  # unable to replace ptr, just R/W keys.

    def __getitem__(self, key: str) -> ObjectModel:
        return self.__objects[key]

    def __setitem__(
        self, key: str, value: ObjectModel | Mapping[str, Any]
    ) -> None:
        self.__objects[key] = (
            value if isinstance(value, ObjectModel)
            # shouldn't keep ptr to external dict.
            else ProtoObject(**dict(value))
        )
        self.__bases.pop(key, None)

    def __delitem__(self, key: str) -> None:
        del self.__objects[key]
        self.__inherits.pop(key, None)
        self.__bases.pop(key, None)
        # children shall stop delegating to it at once.
        children = []
        for name, parents in self.__inherits.items():
            if key in parents:
                parents[:] = [i for i in parents if i != key]
                children.append(name)
        self.__relink([i for i in children if i in self.__bases])

    def __contains__(self, key: object) -> bool:
        return key in self.__objects

    def __len__(self) -> int:
        return len(self.__objects)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__objects)

    def _get_meta(self, key: str) -> ObjectMeta:
        """for ObjectGraphParser.write()."""
        obj = self.__objects[key]
        props = {}
        for k in obj.own_keys():
            desc = obj.get_own_property_descriptor(k)
            if (isinstance(k, str) and desc is not None
                    and desc.enumerable and not desc.is_accessor):
                props[k] = desc.value
        return ObjectMeta(
            name=key, props=props, parents=self.__inherits.get(key))

    def _set_meta(self, meta: ObjectMeta) -> None:
        """for ObjectGraphParser reading."""
        if meta['name'] not in self.__objects:
            self[meta['name']] = meta['props']
        else:
            obj = self.__objects[meta['name']]
            for k, v in meta['props'].items():
                obj[k] = v
        if meta['parents']:  # not None not empty
            self.__inherits[meta['name']] = meta['parents']

    def __reset(self, name: str) -> None:
        """Put back the prototype `name` had before any link."""
        child = self.__objects[name]
        proto = child.get_prototype_of()
        if not DelegationNode.instance_of(proto):
            self.__bases[name] = proto
        elif name in self.__bases:
            if not child.set_prototype_of(self.__bases[name]):
                raise TypeError(f'[{name}] refused to drop its old parents.')

    def __attach(self, name: str) -> None:
        child = self.__objects[name]
        found = []
        for i in self.__inherits.get(name, []):
            if i not in self:
                warn(f'[{name}] inherits "{i}", '
                     'which is not found in this graph.')
                continue
            parent = self.__objects[i]
            if parent is child or any(
                    j is child for j in walk_delegates(parent)):
                warn(f'[{name}] inheriting "{i}" would form a cycle, '
                     'skipped.')
                continue
            found.append(parent)
        attach_delegates(child, found)

    def __relink(self, names: list[str]) -> None:
        names = [i for i in names if i in self.__objects]
        # reset all first, so stale parents can't fake a cycle.
        for i in names:
            self.__reset(i)
        for i in names:
            self.__attach(i)

    def link(self) -> None:
        """(Re)attach declared parents, in declared order.

        Parents declared before but no longer in `self.inherits`
        get dropped, the prototype an object had before is kept first.
        """
        for name in self.__inherits:
            if name not in self:
                warn(f'"{name}" declares parents but is not in this graph.')
        self.__relink(list(self.__objects))

    def find_delegation_mro(self, name: str) -> list[str]:
        """Names of all ancestors of `name`, in lookup order.

        Ancestors that aren't members of this graph are left out.
        """
        names = {id(obj): k for k, obj in self.__objects.items()}
        return [
            names[id(i)] for i in walk_delegates(self[name])
            if id(i) in names
        ]
