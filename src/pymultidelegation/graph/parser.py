# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/05 22:30:56
# @Author : Kariko Lin

"""Object graphs saved as YAML.

The document is a single mapping, `name: {key: value, ...}`.
The reserved key `$inherits` declares parents of an object,
either a list or a comma separated string. Parents are looked up in
declared order, and the first one found wins.
"""

from io import StringIO, TextIOBase
from typing import Any

import chardet
import yaml

from ..abstract import FileHandler
from .model import ObjectGraph, ObjectMeta

INHERITS_KEY = '$inherits'


def _split_parents(parents: Any) -> list[str] | None:
    if parents is None:
        return None
    if isinstance(parents, str):
        parents = parents.split(',')
    return [str(i).strip() for i in parents if str(i).strip()]


class ObjectGraphParser(FileHandler[ObjectGraph]):
    def __init__(self, filename: str, encoding: str | None = None) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase | str, ins: ObjectGraph | None = None,
        source: str = '<stream>'
    ) -> ObjectGraph:
        """Read an already decoded stream (or string), then link it.

        Objects already in `ins` get updated, not replaced.
        `source` only names the document in error messages.
        """
        if ins is None:
            ins = ObjectGraph()
        try:
            doc = yaml.safe_load(buf)
        except yaml.YAMLError as e:
            raise ValueError(f'{source}: not a valid YAML document.') from e
        if doc is None:
            return ins
        if not isinstance(doc, dict):
            raise ValueError(
                f'{source}: an object graph must be a mapping of objects.')
        for name, body in doc.items():
            if body is None:
                body = {}
            if not isinstance(body, dict):
                raise ValueError(
                    f'{source}: "{name}" must be a mapping of properties.')
            body = {str(k): v for k, v in body.items()}
            parents = _split_parents(body.pop(INHERITS_KEY, None))
            ins._set_meta(ObjectMeta(name=str(name), props=body,
                                     parents=parents))
        ins.link()
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('utf-8', errors='replace')
        return StringIO(buf)

    def read(self) -> ObjectGraph:
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp, source=self._fn)
        except UnicodeDecodeError:
            return self.readstream(
                self._decode_file(self._fn), source=self._fn)

    @staticmethod
    def _output_object(meta: ObjectMeta) -> dict[str, Any]:
        ret = dict(meta['props'])
        if meta['parents']:
            ret[INHERITS_KEY] = list(meta['parents'])
        return ret

    def dumps(self, instance: ObjectGraph) -> str:
        return yaml.safe_dump(
            {k: self._output_object(instance._get_meta(k)) for k in instance},
            sort_keys=False, allow_unicode=True)

    def write(self, instance: ObjectGraph) -> None:
        """Save own properties and declared parents of every object.

        Note: inherited values are *not* flattened into children.
        """
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            fp.write(self.dumps(instance))

    def __str__(self) -> str:
        return 'object graph: ' + super().__str__() + f'({self._codec})'
