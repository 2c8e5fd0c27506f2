"""
algorithm - 平滑曲线生成主算法

该模块实现 BezierCurve 类：由一组节点计算 Bezier 样条控制点，
并提供曲线求值、求导和采样接口。
"""

import logging

import numpy as np
from scipy.interpolate import BPoly

from .core.bezier import bezier_segments, to_bpoly
from .core.bezier_spline import compute_control_points, validate_knots
from .core.exceptions import InvalidArgumentError
from .utils.geometry import knots_from_values, value_range

logger = logging.getLogger(__name__)


class BezierCurve:
    """
    穿过全部节点的 C² 连续分段三次 Bezier 曲线。

    曲线使用全局参数 t ∈ [0, n]，第 i 段对应 [i, i+1]。

    Attributes:
        knots: (N, 2) 节点
        first: (n, 2) 第一控制点
        second: (n, 2) 第二控制点
        bpoly: 分段 Bernstein 多项式
    """

    def __init__(self, knots):
        """
        初始化曲线。

        Args:
            knots: (N, 2) 节点，N >= 2；原样保存，校验与转换延迟到 fit
        """
        self._input = knots
        self.knots: np.ndarray | None = None
        self.N = len(knots) if hasattr(knots, "__len__") else 0

        self.first: np.ndarray | None = None
        self.second: np.ndarray | None = None
        self.bpoly: BPoly | None = None

    @classmethod
    def from_values(cls, values) -> "BezierCurve":
        """由数值序列构造，x 坐标均匀分布在 [0, 1]。"""
        return cls(knots_from_values(values))

    @property
    def n_segments(self) -> int:
        return max(self.N - 1, 0)

    def fit(self):
        """计算控制点并构造 Bernstein 多项式。返回 self 以支持链式调用。"""
        knots = validate_knots(self._input)
        if knots.shape[1] != 2:
            raise InvalidArgumentError(
                InvalidArgumentError.BAD_KNOT_SHAPE,
                f"BezierCurve requires (N, 2) knots, got {knots.shape}",
            )
        self.knots = knots
        self.first, self.second = compute_control_points(knots)
        self.bpoly = to_bpoly(self.knots, self.first, self.second)
        logger.debug(f"Fitted BezierCurve with {self.n_segments} segments")
        return self

    @property
    def segments(self) -> np.ndarray:
        """(n, 4, 2) 各段控制多边形"""
        return bezier_segments(self.knots, self.first, self.second)

    def evaluate(self, t: float) -> np.ndarray:
        """
        在参数 t 处评估曲线。

        Args:
            t: 全局参数，超出 [0, n] 时裁剪到端点

        Returns:
            (2,) 曲线上的点
        """
        return self.bpoly(np.clip(t, 0, self.n_segments))

    def evaluate_batch(self, t_values: np.ndarray) -> np.ndarray:
        """
        批量评估曲线。

        Args:
            t_values: (M,) 参数数组

        Returns:
            (M, 2) 点数组
        """
        t_values = np.clip(np.asarray(t_values, dtype=np.float64), 0, self.n_segments)
        return self.bpoly(t_values)

    def derivative(self, t: float | np.ndarray, order: int = 1) -> np.ndarray:
        """计算参数 t 处的 1~3 阶导数"""
        if order not in (1, 2, 3):
            raise ValueError(f"Order {order} not supported")
        t = np.clip(np.asarray(t, dtype=np.float64), 0, self.n_segments)
        return self.bpoly.derivative(order)(t)

    def sample_uniform(self, num_points: int) -> tuple[np.ndarray, np.ndarray]:
        """
        沿参数均匀采样。

        Args:
            num_points: 采样点数

        Returns:
            t_values: (M,) 参数值
            points: (M, 2) 曲线上的点
        """
        if num_points < 2:
            raise ValueError(f"num_points must be at least 2, got {num_points}")
        t_values = np.linspace(0, self.n_segments, num_points)
        return t_values, self.evaluate_batch(t_values)

    def value_bounds(self) -> tuple[float, float]:
        """y 方向显示范围，包含所有节点与控制点。"""
        return value_range(self.knots, self.first, self.second)

    def __repr__(self) -> str:
        status = "fitted" if self.bpoly is not None else "not fitted"
        return f"BezierCurve(N={self.N}, segments={self.n_segments}, {status})"


if __name__ == "__main__":
    from bezier_spline.datasets import random_values, RandomSeriesConfig

    values = random_values(RandomSeriesConfig(seed=0))

    print("=== Bezier 曲线测试 ===")
    print(f"输入点数: {len(values)}")

    curve = BezierCurve.from_values(values).fit()
    print(curve)

    # 验证插值精度
    errors = [np.linalg.norm(curve.evaluate(i) - knot) for i, knot in enumerate(curve.knots)]
    print(f"插值误差: max={max(errors):.2e}")

    # 验证内部节点处导数连续
    for order in (1, 2):
        jumps = []
        for i in range(1, curve.n_segments):
            left = curve.bpoly.derivative(order)(i - 1e-12)
            right = curve.bpoly.derivative(order)(i + 1e-12)
            jumps.append(np.abs(left - right).max())
        print(f"{order} 阶导数跳变: max={max(jumps):.2e}")

    min_y, max_y = curve.value_bounds()
    print(f"显示范围: [{min_y:.2f}, {max_y:.2f}]")
