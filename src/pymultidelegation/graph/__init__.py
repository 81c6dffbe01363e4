# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/05 21:45:02
# @Author : Kariko Lin

from .model import ObjectGraph, ObjectMeta
from .parser import INHERITS_KEY, ObjectGraphParser
