# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 15:00:12
# @Author : Kariko Lin

from .model import PropertyDescriptor, PropertyKey, ProtoObject, Symbol
from .proxy import InterceptProxy, TrapHandler
