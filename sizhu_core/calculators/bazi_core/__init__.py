#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
八字核心计算模块

- 五行关系计算
- 十神计算
"""

from .element_relations import (
    ELEMENT_CYCLE,
    get_element_relation,
)
from .ten_gods import (
    get_ten_god,
    get_branch_ten_gods,
)

__all__ = [
    'ELEMENT_CYCLE',
    'get_element_relation',
    'get_ten_god',
    'get_branch_ten_gods',
]
