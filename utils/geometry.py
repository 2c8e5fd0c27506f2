"""
geometry - 数值坐标与视图坐标转换

数值坐标系以左下角为原点：x 均匀分布在 [0, 1]，y 为原始数值。
视图坐标系以左上角为原点，单位为像素。
"""

from dataclasses import dataclass

import numpy as np

EPSILON = 1e-12


def knots_from_values(values) -> np.ndarray:
    """
    由一组数值生成节点坐标。

    第 i 个数值 v（共 N 个）映射为点 (i / (N-1), v)。

    Args:
        values: (N,) 数值序列

    Returns:
        knots: (N, 2) 节点；N == 1 时 x 取 0，空输入返回 (0, 2) 数组
    """
    if values is None:
        return np.empty((0, 2))
    values = np.asarray(values, dtype=np.float64).ravel()
    N = len(values)
    if N < 2:
        return np.column_stack([np.zeros(N), values])
    return np.column_stack([np.linspace(0, 1, N), values])


def value_range(*point_sets: np.ndarray) -> tuple[float, float]:
    """
    计算若干点集在 y 方向上的取值范围。

    Args:
        point_sets: 若干 (m, 2) 点集，第 1 列为 y 坐标

    Returns:
        min_y, max_y
    """
    ys = np.concatenate([np.asarray(p, dtype=np.float64)[:, 1] for p in point_sets])
    return float(ys.min()), float(ys.max())


@dataclass
class Viewport:
    """绘图区域尺寸 (px)"""

    width: float
    height: float
    padding_left: float = 0.0
    padding_top: float = 0.0
    padding_right: float = 0.0
    padding_bottom: float = 0.0

    def transform_x(self, x: float | np.ndarray) -> float | np.ndarray:
        """x 坐标: 数值坐标 -> 视图坐标"""
        pl, pr = self.padding_left, self.padding_right
        return pl + np.asarray(x) * (self.width - pl - pr)

    def transform_y(self, y: float | np.ndarray, min_y: float, max_y: float) -> float | np.ndarray:
        """
        y 坐标: 数值坐标 -> 视图坐标。

        min_y 落在下边距处，max_y 落在上边距处；
        取值范围退化为一点时，映射到绘图区域垂直中心。
        """
        h, pt, pb = self.height, self.padding_top, self.padding_bottom
        y = np.asarray(y, dtype=np.float64)
        if max_y - min_y < EPSILON:
            return np.full_like(y, (pt + h - pb) / 2)
        return h - pb + (y - min_y) * (pt + pb - h) / (max_y - min_y)

    def transform(self, points: np.ndarray, min_y: float, max_y: float) -> np.ndarray:
        """
        批量转换点坐标。

        Args:
            points: (m, 2) 数值坐标
            min_y, max_y: y 方向显示范围

        Returns:
            (m, 2) 视图坐标
        """
        points = np.asarray(points, dtype=np.float64)
        return np.column_stack([
            self.transform_x(points[:, 0]),
            self.transform_y(points[:, 1], min_y, max_y),
        ])
