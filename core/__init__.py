"""
core - 核心算法模块

包含:
- bezier_spline: Bezier 样条控制点求解
- bezier: 分段 Bernstein 多项式表示
- exceptions: 错误类型
"""

from .bezier import bezier_segments, to_bpoly
from .bezier_spline import (
    Point2D,
    as_points,
    build_rhs,
    compute_control_points,
    solve_first_control_points,
    tridiagonal_bands,
)
from .exceptions import BezierSplineError, InvalidArgumentError

__all__ = [
    "bezier_segments",
    "to_bpoly",
    "Point2D",
    "as_points",
    "build_rhs",
    "compute_control_points",
    "solve_first_control_points",
    "tridiagonal_bands",
    "BezierSplineError",
    "InvalidArgumentError",
]
