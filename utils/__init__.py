"""
utils - 工具函数模块

包含:
- geometry: 数值坐标生成与视图坐标转换
"""

from .geometry import Viewport, knots_from_values, value_range

__all__ = [
    "Viewport",
    "knots_from_values",
    "value_range",
]
