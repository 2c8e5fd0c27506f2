"""
visualization - 曲线渲染

包含:
- paths: matplotlib Path 与 SVG 路径构造
- plot: 曲线渲染与渐进绘制动画
"""

from .paths import area_path, bezier_path, svg_path_data
from .plot import RenderOptions, accelerate_decelerate, animate_reveal, render_curve, reveal_frames

__all__ = [
    "area_path",
    "bezier_path",
    "svg_path_data",
    "RenderOptions",
    "accelerate_decelerate",
    "animate_reveal",
    "render_curve",
    "reveal_frames",
]
