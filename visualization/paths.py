"""
paths - 曲线路径构造

将拟合后的 BezierCurve 转换为 matplotlib Path 或 SVG 路径数据。
"""

import numpy as np
from matplotlib.path import Path

from ..algorithm import BezierCurve
from ..utils.geometry import Viewport


def _fitted(curve: BezierCurve) -> BezierCurve:
    if curve.bpoly is None:
        curve.fit()
    return curve


def bezier_path(curve: BezierCurve) -> Path:
    """
    构造三次 Bezier 路径。

    路径以 MOVETO 到首个节点开始，每段追加三个 CURVE4 顶点：
    第一控制点、第二控制点、下一节点。

    Args:
        curve: BezierCurve，未拟合时自动拟合

    Returns:
        matplotlib Path，共 3n+1 个顶点
    """
    curve = _fitted(curve)
    n = curve.n_segments

    vertices = np.empty((3 * n + 1, 2))
    vertices[0] = curve.knots[0]
    vertices[1::3] = curve.first
    vertices[2::3] = curve.second
    vertices[3::3] = curve.knots[1:]

    codes = np.full(3 * n + 1, Path.CURVE4, dtype=Path.code_type)
    codes[0] = Path.MOVETO
    return Path(vertices, codes)


def area_path(curve: BezierCurve, baseline: float) -> Path:
    """曲线与水平基线 y=baseline 围成的闭合区域。"""
    path = bezier_path(curve)
    first_knot, last_knot = curve.knots[0], curve.knots[-1]
    closing = np.array([
        [last_knot[0], baseline],
        [first_knot[0], baseline],
        first_knot,
    ])
    vertices = np.concatenate([path.vertices, closing])
    codes = np.concatenate([path.codes, [Path.LINETO, Path.LINETO, Path.CLOSEPOLY]])
    return Path(vertices, codes)


def svg_path_data(curve: BezierCurve, viewport: Viewport, precision: int = 2) -> str:
    """
    生成视图坐标下的 SVG 路径数据。

    y 方向显示范围取曲线的 value_bounds()，即包含所有节点和控制点。

    Args:
        curve: BezierCurve，未拟合时自动拟合
        viewport: 视图尺寸与边距
        precision: 坐标小数位数

    Returns:
        形如 "M x,y C x1,y1 x2,y2 x,y ..." 的字符串
    """
    curve = _fitted(curve)
    min_y, max_y = curve.value_bounds()
    knots = viewport.transform(curve.knots, min_y, max_y)
    first = viewport.transform(curve.first, min_y, max_y)
    second = viewport.transform(curve.second, min_y, max_y)

    def fmt(p):
        return f"{p[0]:.{precision}f},{p[1]:.{precision}f}"

    parts = [f"M {fmt(knots[0])}"]
    for i in range(curve.n_segments):
        parts.append(f"C {fmt(first[i])} {fmt(second[i])} {fmt(knots[i + 1])}")
    return " ".join(parts)
