# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 14:31:07
# @Author : Kariko Lin

from enum import Enum


# shown by node metadata, mostly for debugger output.
METADATA_TYPE = 'Multiple delegation proxy'


class Operation(str, Enum):
    """Fundamental operations a delegation node resolves."""
    GET = 'get'
    SET = 'set'
    HAS = 'has'
    DELETE_PROPERTY = 'deleteProperty'
    DEFINE_PROPERTY = 'defineProperty'
    GET_OWN_PROPERTY_DESCRIPTOR = 'getOwnPropertyDescriptor'
    # shape queries below are never distributed across delegates.
    OWN_KEYS = 'ownKeys'
    GET_PROTOTYPE_OF = 'getPrototypeOf'
    IS_EXTENSIBLE = 'isExtensible'
    PREVENT_EXTENSIONS = 'preventExtensions'


class DropReason(str, Enum):
    NULL = 'null'
    NOT_AN_OBJECT = 'not an object'
    SELF_REFERENCE = 'self reference'
    DUPLICATE = 'duplicate'
