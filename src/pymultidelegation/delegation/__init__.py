# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/03 10:11:58
# @Author : Kariko Lin

from .handler import DelegationHandler
from .keys import KEYS
from .node import (
    DelegateList,
    DelegationNode,
    NodeHandle,
    NodeMetadata,
    attach_delegates,
    debug_bookkeeping_keys,
    walk_delegates
)
