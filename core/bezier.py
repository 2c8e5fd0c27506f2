"""
bezier - 分段三次 Bezier 曲线的 Bernstein 表示

三次 Bezier 曲线的 Bernstein 系数即为其控制多边形，
因此可直接构造 scipy BPoly 进行求值和求导。
"""

import numpy as np
from scipy.interpolate import BPoly


def bezier_segments(knots: np.ndarray, first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """
    组装每段曲线的控制多边形。

    Args:
        knots: (n+1, D) 节点
        first: (n, D) 第一控制点
        second: (n, D) 第二控制点

    Returns:
        segments: (n, 4, D)，第 i 段为 [K_i, P1_i, P2_i, K_{i+1}]
    """
    knots = np.asarray(knots, dtype=np.float64)
    return np.stack([knots[:-1], first, second, knots[1:]], axis=1)


def to_bpoly(knots: np.ndarray, first: np.ndarray, second: np.ndarray) -> BPoly:
    """
    构造分段 Bernstein 多项式。

    断点为 0, 1, ..., n，第 i 段定义在 [i, i+1] 上，
    段内局部参数即为 Bezier 参数 t。

    Args:
        knots: (n+1, D) 节点
        first: (n, D) 第一控制点
        second: (n, D) 第二控制点

    Returns:
        BPoly 对象，输出形状 (D,)
    """
    segments = bezier_segments(knots, first, second)
    # BPoly 系数布局: (阶数+1, 段数, D)
    coeffs = np.transpose(segments, (1, 0, 2))
    breakpoints = np.arange(len(segments) + 1, dtype=np.float64)
    return BPoly(coeffs, breakpoints)
