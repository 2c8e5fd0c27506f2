"""
bezier_spline - 穿过给定数值点的平滑曲线

参考: "Draw a Smooth Curve through a Set of 2D Points with Bezier Primitives"

该库计算开放三次 Bezier 样条的控制点，使分段曲线穿过全部节点且 C² 连续，
并提供曲线求值、渐进绘制动画与节点/控制点标记的渲染。
"""

from .algorithm import BezierCurve
from .core.bezier_spline import Point2D, compute_control_points
from .core.exceptions import BezierSplineError, InvalidArgumentError

__version__ = "0.1.0"
__all__ = [
    "BezierCurve",
    "Point2D",
    "compute_control_points",
    "BezierSplineError",
    "InvalidArgumentError",
]
