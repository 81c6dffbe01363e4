# -*- encoding: utf-8 -*-
# @File   : keys.py
# @Time   : 2024/11/03 10:12:30
# @Author : Kariko Lin

from typing import NamedTuple

from ..objmodel import Symbol


class BookkeepingKeys(NamedTuple):
    delegates: Symbol
    target: Symbol
    metadata: Symbol


# symbols can't collide with any string key of user data.
KEYS = BookkeepingKeys(
    delegates=Symbol('delegation list'),
    target=Symbol('delegation target'),
    metadata=Symbol('delegation metadata'),
)
