# -*- coding: utf-8 -*-
"""
分页向量异常体系

容器本身是“信任调用方”的设计：默认配置下越界访问不做检查，
这里的异常只在调试检查开启、资源耗尽或配置错误时抛出。
"""
from typing import Dict, Optional
from enum import Enum


class ErrorType(Enum):
    """错误类型"""
    INVALID_OFFSET = "INVALID_OFFSET"
    ALLOCATION_FAILURE = "ALLOCATION_FAILURE"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISMATCH = "CONFIG_MISMATCH"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class PagedVectorError(Exception):
    """分页向量异常基类"""

    def __init__(self, message: str, error_type: ErrorType = ErrorType.UNKNOWN_ERROR,
                 details: Optional[Dict] = None):
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def __str__(self):
        if self.details:
            extra = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"[{self.error_type.value}] {self.message} ({extra})"
        return f"[{self.error_type.value}] {self.message}"


class InvalidOffsetError(PagedVectorError, IndexError):
    """偏移越界（仅在开启 bounds_check 时抛出）"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, ErrorType.INVALID_OFFSET, details)


class PageAllocationError(PagedVectorError, MemoryError):
    """页面或页表分配失败，不可恢复"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, ErrorType.ALLOCATION_FAILURE, details)


class CapacityExceededError(PagedVectorError, OverflowError):
    """元素数量超出 32 位无符号范围"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, ErrorType.CAPACITY_EXCEEDED, details)


class ConfigError(PagedVectorError, ValueError):
    """配置取值非法"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, ErrorType.CONFIG_ERROR, details)


class ConfigMismatchError(PagedVectorError, TypeError):
    """两个容器配置不兼容（例如赋值时页大小不同）"""

    def __init__(self, message: str, details: Optional[Dict] = None):
        super().__init__(message, ErrorType.CONFIG_MISMATCH, details)
