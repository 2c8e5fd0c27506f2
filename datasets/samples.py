"""
samples - 演示与测试用数值序列

数据说明:
- random_values: 演示程序 "Plot" 按钮生成的随机序列，10 个 [0, 1000) 之间的数值
- symmetric_values: 关于中点对称的序列，用于验证控制点的镜像对称性
- three_knot_path: 三节点示例路径
"""

from dataclasses import dataclass

import numpy as np


@dataclass
class RandomSeriesConfig:
    """随机序列参数"""

    length: int = 10  # 数值个数
    scale: float = 1000.0  # 取值上限
    seed: int | None = None  # 随机种子，None 表示不固定


_SYMMETRIC_VALUES = np.array([120.0, 480.0, 310.0, 860.0, 310.0, 480.0, 120.0])

_THREE_KNOT_PATH = np.array(
    [
        [0.0, 0.0],
        [0.5, 10.0],
        [1.0, 0.0],
    ],
    dtype=np.float64,
)


def random_values(config: RandomSeriesConfig | None = None) -> np.ndarray:
    """
    生成随机数值序列。

    Args:
        config: 序列参数，默认 10 个 [0, 1000) 之间的数值

    Returns:
        values: (length,) 数值数组
    """
    if config is None:
        config = RandomSeriesConfig()
    rng = np.random.default_rng(config.seed)
    return rng.random(config.length) * config.scale


def symmetric_values() -> np.ndarray:
    """获取回文对称的数值序列。"""
    return _SYMMETRIC_VALUES.copy()


def three_knot_path() -> np.ndarray:
    """获取三节点路径 [(0, 0), (0.5, 10), (1, 0)]。"""
    return _THREE_KNOT_PATH.copy()


if __name__ == "__main__":
    values = random_values(RandomSeriesConfig(seed=42))
    print("=== 随机序列 ===")
    print(f"点数: {len(values)}")
    print(f"范围: [{values.min():.1f}, {values.max():.1f}]")

    symmetric = symmetric_values()
    print(f"\n对称序列回文验证: {np.array_equal(symmetric, symmetric[::-1])}")
