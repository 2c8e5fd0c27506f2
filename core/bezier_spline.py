"""
bezier_spline - 开放三次 Bezier 样条控制点求解

给定一组有序节点 (knots)，计算每段三次 Bezier 曲线的两个控制点，
使拼接后的分段曲线穿过全部节点，并在内部节点处 C² 连续。

实现:
1. 两节点特例：退化为直线
2. 三对角线性方程组右端项构造
3. Thomas 算法求解第一控制点 (x、y 两轴共用同一系数矩阵)
4. 由第一控制点反射得到第二控制点
"""

from typing import NamedTuple

import numpy as np

from .exceptions import InvalidArgumentError


class Point2D(NamedTuple):
    """平面点"""

    x: float
    y: float


def as_points(array: np.ndarray) -> list[Point2D]:
    """将 (n, 2) 数组转换为 Point2D 列表。"""
    return [Point2D(float(x), float(y)) for x, y in np.asarray(array)]


def tridiagonal_bands(n: int) -> np.ndarray:
    """
    第一控制点方程组的系数矩阵（带状存储）。

    矩阵与数据无关：主对角线首行为 2，内部为 4，末行为 3.5，
    上下次对角线均为 1。

    Args:
        n: 曲线段数

    Returns:
        ab: (3, n) 带状矩阵，布局与 scipy.linalg.solve_banded((1, 1), ...) 一致
    """
    ab = np.ones((3, n))
    ab[1, :] = 4.0
    ab[1, 0] = 2.0
    ab[1, -1] = 3.5
    ab[0, 0] = 0.0
    ab[2, -1] = 0.0
    return ab


def build_rhs(knots: np.ndarray) -> np.ndarray:
    """
    构造方程组右端项。

        rhs[0]   = K[0] + 2 K[1]
        rhs[i]   = 4 K[i] + 2 K[i+1],     1 <= i <= n-2
        rhs[n-1] = (8 K[n-1] + K[n]) / 2

    Args:
        knots: (n+1, D) 节点，n >= 2

    Returns:
        rhs: (n, D) 右端项，每列对应一个坐标轴
    """
    n = len(knots) - 1
    rhs = 4 * knots[:-1] + 2 * knots[1:]
    rhs[0] = knots[0] + 2 * knots[1]
    rhs[n - 1] = (8 * knots[n - 1] + knots[n]) / 2
    return rhs


def solve_first_control_points(rhs: np.ndarray) -> np.ndarray:
    """
    求解三对角方程组，得到第一控制点坐标。

    采用 Thomas 算法（追赶法）：先分解并前向消元，再回代。
    系数矩阵对角占优，无需选主元。

    Args:
        rhs: (n,) 或 (n, D) 右端项，各列独立求解

    Returns:
        x: 与 rhs 形状相同的解向量
    """
    rhs = np.asarray(rhs, dtype=np.float64)
    n = len(rhs)
    x = np.zeros_like(rhs)
    tmp = np.zeros(n)

    b = 2.0
    x[0] = rhs[0] / b

    # 分解与前向消元
    for i in range(1, n):
        tmp[i] = 1 / b
        b = (4.0 if i < n - 1 else 3.5) - tmp[i]
        x[i] = (rhs[i] - x[i - 1]) / b

    # 回代
    for i in range(1, n):
        x[n - i - 1] -= tmp[n - i] * x[n - i]

    return x


def validate_knots(knots) -> np.ndarray:
    """
    校验并转换节点。

    Raises:
        InvalidArgumentError: knots 为 None、节点少于两个或无法转换为 (N, D) 数组
    """
    if knots is None:
        raise InvalidArgumentError(InvalidArgumentError.NULL_KNOTS, "knots is None")

    try:
        count = len(knots)
    except TypeError as e:
        raise InvalidArgumentError(InvalidArgumentError.BAD_KNOT_SHAPE, str(e)) from e

    if count - 1 < 1:
        raise InvalidArgumentError(
            InvalidArgumentError.INSUFFICIENT_KNOTS, "at least two knot points required"
        )

    try:
        knots = np.array(knots, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(InvalidArgumentError.BAD_KNOT_SHAPE, str(e)) from e

    if knots.ndim != 2 or knots.shape[1] < 1:
        raise InvalidArgumentError(
            InvalidArgumentError.BAD_KNOT_SHAPE,
            f"knots must have shape (N, D), got {knots.shape}",
        )
    return knots


def _validate_buffers(out, expected: tuple[int, int]):
    # 须为两个可写 ndarray，形状均为 (n, D)
    if not isinstance(out, (tuple, list)) or len(out) != 2:
        raise InvalidArgumentError(
            InvalidArgumentError.BAD_OUTPUT_LENGTH,
            "out must be a pair of (first, second) buffers",
        )
    for buf in out:
        if not isinstance(buf, np.ndarray) or buf.shape != expected or not buf.flags.writeable:
            raise InvalidArgumentError(
                InvalidArgumentError.BAD_OUTPUT_LENGTH,
                f"control point buffers must be writable arrays of shape {expected}",
            )


def compute_control_points(
    knots,
    out: tuple[np.ndarray, np.ndarray] | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    计算开放 Bezier 样条的控制点。

    第 i 段曲线从 knots[i] 到 knots[i+1]，控制点为 first[i] 与 second[i]。

    Args:
        knots: (N, D) 节点，N >= 2；也接受 Point2D 列表
        out: 可选，预分配的 (first, second) 输出缓冲区，形状须为 (N-1, D)

    Returns:
        first: (N-1, D) 第一控制点
        second: (N-1, D) 第二控制点

    Raises:
        InvalidArgumentError: knots 为 None、节点少于两个、形状非法，
            或输出缓冲区长度不为 N-1
    """
    knots = validate_knots(knots)
    n = len(knots) - 1

    if out is not None:
        _validate_buffers(out, (n, knots.shape[1]))

    if n == 1:
        # 特例：曲线退化为直线
        # 3 P1 = 2 P0 + P3
        first = (2 * knots[0:1] + knots[1:2]) / 3
        # P2 = 2 P1 - P0
        second = 2 * first - knots[0:1]
    else:
        first = solve_first_control_points(build_rhs(knots))

        second = np.empty_like(first)
        second[:-1] = 2 * knots[1:-1] - first[1:]
        second[-1] = (knots[n] + first[n - 1]) / 2

    if out is not None:
        out[0][...] = first
        out[1][...] = second

    return first, second


if __name__ == "__main__":
    print("=== Bezier 样条控制点测试 ===")

    knots = np.array([[0.0, 0.0], [0.5, 10.0], [1.0, 0.0]])
    first, second = compute_control_points(knots)

    print(f"节点数: {len(knots)}")
    for i in range(len(first)):
        print(f"  段 {i}: first={first[i]}, second={second[i]}")

    ab = tridiagonal_bands(len(first))
    A = np.diag(ab[1]) + np.diag(ab[0, 1:], 1) + np.diag(ab[2, :-1], -1)
    residual = A @ first - build_rhs(knots)
    print(f"方程组残差: {np.abs(residual).max():.2e}")
