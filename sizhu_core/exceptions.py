#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
排盘异常

- ValidationError: 输入不合法，调用历法之前就拒绝
- OracleError: 历法换算失败，原样上抛，不在本地重试
- ContractViolation: 历法返回的数据违反约定（大运不是8步、流年不是10年等），属于程序错误
"""

from typing import Optional


class BaziError(Exception):
    """排盘异常基类"""
    def __init__(self, message: str, code: int = 400, error_type: str = "bazi_error"):
        self.message = message
        self.code = code
        self.error_type = error_type
        super().__init__(message)


class ValidationError(BaziError):
    """参数验证错误"""
    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        error_type = f"validation_error:{field}" if field else "validation_error"
        super().__init__(message, code=400, error_type=error_type)


class OracleError(BaziError):
    """历法换算失败"""
    def __init__(self, message: str = "unable to compute calendar for this date"):
        super().__init__(message, code=422, error_type="oracle_error")


class ContractViolation(BaziError):
    """历法返回数据违反约定"""
    def __init__(self, message: str):
        super().__init__(message, code=500, error_type="contract_violation")


__all__ = ['BaziError', 'ValidationError', 'OracleError', 'ContractViolation']
