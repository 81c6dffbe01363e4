# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 14:02:36
# @Author : Kariko Lin

import logging

from .abstract import ObjectModel
from .consts import DropReason, Operation
from .delegation import (
    DelegateList,
    DelegationHandler,
    DelegationNode,
    NodeHandle,
    attach_delegates,
    debug_bookkeeping_keys,
    walk_delegates
)
from .graph import ObjectGraph, ObjectGraphParser
from .objmodel import (
    InterceptProxy,
    PropertyDescriptor,
    ProtoObject,
    Symbol,
    TrapHandler
)

__all__ = [
    'ObjectModel', 'ProtoObject', 'PropertyDescriptor', 'Symbol',
    'InterceptProxy', 'TrapHandler',
    'DelegationNode', 'DelegationHandler', 'DelegateList', 'NodeHandle',
    'attach_delegates', 'walk_delegates', 'debug_bookkeeping_keys',
    'DropReason', 'Operation',
    'ObjectGraph', 'ObjectGraphParser'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
