"""
plot - 曲线渲染与渐进绘制动画

渲染内容:
1. 沿 y 方向渐变着色的曲线
2. 曲线下方的渐变填充区域
3. 按绘制进度遮挡右侧尚未显示的部分
4. 可选的节点与控制点标记
"""

import logging
import time
from dataclasses import dataclass, replace

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection
from matplotlib.colors import LinearSegmentedColormap, Normalize, to_rgb
from matplotlib.patches import PathPatch, Rectangle

from ..algorithm import BezierCurve
from .paths import area_path

logger = logging.getLogger(__name__)


@dataclass
class RenderOptions:
    """渲染参数"""

    progress: float = 1.0  # 绘制进度 [0, 1]
    draw_value_points: bool = False  # 标记节点
    draw_control_points: bool = False  # 标记控制点

    line_color_top: str = "#FF3A29"
    line_color_bottom: str = "#FFB07A"
    area_color: str = "#FD5D55"
    area_alpha: float = 38 / 255
    stroke_width: float = 3.0

    value_point_color: str = "black"
    first_control_color: str = "green"
    second_control_color: str = "blue"
    marker_size: float = 30.0

    samples_per_segment: int = 32
    figsize: tuple = (8.0, 4.0)


def accelerate_decelerate(t: float | np.ndarray) -> float | np.ndarray:
    """先加速后减速的缓动曲线，t ∈ [0, 1]。"""
    return np.cos((np.asarray(t) + 1) * np.pi) / 2 + 0.5


def reveal_frames(duration_ms: float = 1000.0, fps: float = 60.0) -> np.ndarray:
    """
    渐进绘制动画的逐帧进度。

    Args:
        duration_ms: 动画时长 (ms)
        fps: 帧率

    Returns:
        progress: (M,) 从 0 到 1 的进度序列
    """
    num_frames = max(int(round(duration_ms / 1000.0 * fps)), 1)
    return accelerate_decelerate(np.linspace(0, 1, num_frames + 1))


def _as_curve(data) -> BezierCurve:
    if isinstance(data, BezierCurve):
        return data
    return BezierCurve.from_values(data)


def _draw_line(ax: Axes, curve: BezierCurve, options: RenderOptions, min_y: float, max_y: float):
    num_points = options.samples_per_segment * curve.n_segments + 1
    _, points = curve.sample_uniform(num_points)
    segments = np.stack([points[:-1], points[1:]], axis=1)

    cmap = LinearSegmentedColormap.from_list(
        "bezier_line", [options.line_color_bottom, options.line_color_top]
    )
    mid_y = (points[:-1, 1] + points[1:, 1]) / 2
    colors = cmap(Normalize(min_y, max_y)(mid_y))

    lines = LineCollection(segments, colors=colors, linewidths=options.stroke_width, capstyle="round")
    ax.add_collection(lines)
    return lines


def _draw_area(ax: Axes, curve: BezierCurve, options: RenderOptions, min_y: float, max_y: float, reveal_x: float):
    area = PathPatch(area_path(curve, min_y), transform=ax.transData)

    # 顶部为 area_alpha，底部透明
    gradient = np.zeros((256, 1, 4))
    gradient[..., :3] = to_rgb(options.area_color)
    gradient[..., 3] = np.linspace(0, options.area_alpha, 256)[:, np.newaxis]

    x0 = curve.knots[0, 0]
    image = ax.imshow(
        gradient,
        extent=(x0, reveal_x, min_y, max_y),
        origin="lower",
        aspect="auto",
        interpolation="bilinear",
    )
    image.set_clip_path(area)
    return image


def render_curve(data, ax: Axes | None = None, options: RenderOptions | None = None) -> Axes:
    """
    绘制穿过数值点的平滑曲线。

    Args:
        data: 数值序列或 BezierCurve
        ax: 目标坐标轴，默认新建
        options: 渲染参数

    Returns:
        绘制所用的坐标轴；少于两个数值点时不绘制任何内容
    """
    anchor = time.perf_counter()
    if options is None:
        options = RenderOptions()
    if ax is None:
        _, ax = plt.subplots(figsize=options.figsize)

    curve = _as_curve(data)
    # 至少需要两个点
    if curve.N < 2:
        logger.debug("render_curve: fewer than two knots, nothing to draw")
        return ax
    if curve.bpoly is None:
        curve.fit()

    min_y, max_y = curve.value_bounds()
    if max_y - min_y < 1e-12:
        min_y, max_y = min_y - 0.5, max_y + 0.5
    x0, x1 = curve.knots[0, 0], curve.knots[-1, 0]
    progress = float(np.clip(options.progress, 0.0, 1.0))
    reveal_x = x0 + (x1 - x0) * progress

    if progress > 0:
        span = max_y - min_y
        mask = Rectangle(
            (x0 - (x1 - x0), min_y - span),
            (reveal_x - x0) + (x1 - x0),
            3 * span,
            transform=ax.transData,
        )
        lines = _draw_line(ax, curve, options, min_y, max_y)
        lines.set_clip_path(mask)
        if reveal_x > x0:
            _draw_area(ax, curve, options, min_y, max_y, reveal_x)

    if options.draw_value_points:
        ax.scatter(*curve.knots.T, s=options.marker_size, color=options.value_point_color, zorder=3)

    if options.draw_control_points:
        ax.scatter(*curve.first.T, s=options.marker_size, color=options.first_control_color, zorder=3)
        ax.scatter(*curve.second.T, s=options.marker_size, color=options.second_control_color, zorder=3)

    ax.set_xlim(x0, x1)
    ax.set_ylim(min_y, max_y)

    logger.debug(f"render_curve: {(time.perf_counter() - anchor) * 1000:.1f}ms")
    return ax


def animate_reveal(
    data,
    fig: plt.Figure | None = None,
    duration_ms: float = 1000.0,
    fps: float = 60.0,
    options: RenderOptions | None = None,
) -> FuncAnimation:
    """
    生成曲线从左到右渐进绘制的动画。

    Args:
        data: 数值序列或 BezierCurve
        fig: 目标图像，默认新建
        duration_ms: 动画时长 (ms)
        fps: 帧率
        options: 渲染参数，其中 progress 由动画逐帧覆盖

    Returns:
        FuncAnimation 对象，调用方负责保存或显示
    """
    if options is None:
        options = RenderOptions()
    if fig is None:
        fig = plt.figure(figsize=options.figsize)
    ax = fig.add_subplot() if not fig.axes else fig.axes[0]

    curve = _as_curve(data)
    if curve.N >= 2:
        curve.fit()

    def update(progress):
        ax.clear()
        render_curve(curve, ax=ax, options=replace(options, progress=progress))
        return []

    return FuncAnimation(
        fig,
        update,
        frames=reveal_frames(duration_ms, fps),
        interval=1000.0 / fps,
        repeat=False,
    )


if __name__ == "__main__":
    from bezier_spline.datasets import random_values, RandomSeriesConfig

    logging.basicConfig(level=logging.DEBUG)

    values = random_values(RandomSeriesConfig(seed=7))
    options = RenderOptions(draw_value_points=True, draw_control_points=True)

    ax = render_curve(values, options=options)
    ax.figure.savefig("bezier_curve.png", dpi=150)
    print("已保存: bezier_curve.png")
