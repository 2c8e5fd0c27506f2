"""
datasets - 示例数据集

包含:
- samples: 随机序列、对称序列与三节点路径
"""

from .samples import RandomSeriesConfig, random_values, symmetric_values, three_knot_path

__all__ = [
    "RandomSeriesConfig",
    "random_values",
    "symmetric_values",
    "three_knot_path",
]
