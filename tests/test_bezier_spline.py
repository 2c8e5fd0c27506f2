"""
bezier_spline 模块单元测试
"""

import numpy as np
import pytest
from scipy.linalg import solve_banded

from bezier_spline.core.bezier_spline import (
    Point2D,
    as_points,
    build_rhs,
    compute_control_points,
    solve_first_control_points,
    tridiagonal_bands,
)
from bezier_spline.core.exceptions import InvalidArgumentError
from bezier_spline.datasets import symmetric_values, three_knot_path
from bezier_spline.utils.geometry import knots_from_values


def segment_derivatives(knots, first, second):
    """各段在 t=0 与 t=1 处的一阶、二阶导数"""
    P0, P1, P2, P3 = knots[:-1], first, second, knots[1:]
    d1_start = 3 * (P1 - P0)
    d1_end = 3 * (P3 - P2)
    d2_start = 6 * (P0 - 2 * P1 + P2)
    d2_end = 6 * (P1 - 2 * P2 + P3)
    return d1_start, d1_end, d2_start, d2_end


def dense_matrix(n):
    ab = tridiagonal_bands(n)
    return np.diag(ab[1]) + np.diag(ab[0, 1:], 1) + np.diag(ab[2, :-1], -1)


@pytest.fixture
def random_knots():
    rng = np.random.default_rng(2016)
    x = np.sort(rng.random(12))
    y = rng.random(12) * 1000
    return np.column_stack([x, y])


class TestTridiagonalSolver:
    """三对角方程组求解测试"""

    def test_bands_layout(self):
        """测试系数矩阵常量"""
        A = dense_matrix(5)
        np.testing.assert_allclose(np.diag(A), [2, 4, 4, 4, 3.5])
        np.testing.assert_allclose(np.diag(A, 1), 1)
        np.testing.assert_allclose(np.diag(A, -1), 1)

    def test_matches_banded_solver(self):
        """测试与 scipy 带状矩阵求解结果一致"""
        rhs = np.random.default_rng(0).random(9) * 100
        x = solve_first_control_points(rhs)
        expected = solve_banded((1, 1), tridiagonal_bands(9), rhs)
        np.testing.assert_allclose(x, expected, rtol=1e-12)

    def test_columns_solved_independently(self):
        """测试多列右端项逐列求解"""
        rhs = np.random.default_rng(1).random((6, 2))
        x = solve_first_control_points(rhs)
        np.testing.assert_allclose(x[:, 0], solve_first_control_points(rhs[:, 0]))
        np.testing.assert_allclose(x[:, 1], solve_first_control_points(rhs[:, 1]))

    def test_two_rows(self):
        """测试最小规模 n=2"""
        x = solve_first_control_points(np.array([1.0, 2.5]))
        np.testing.assert_allclose(x, [1 / 6, 2 / 3])


class TestControlPoints:
    """控制点计算测试"""

    def test_two_knots_straight_line(self):
        """测试两节点退化为直线"""
        first, second = compute_control_points([(0, 0), (1, 1)])
        np.testing.assert_allclose(first, [[1 / 3, 1 / 3]])
        np.testing.assert_allclose(second, [[2 / 3, 2 / 3]])

    def test_three_knots(self):
        """测试三节点示例"""
        knots = three_knot_path()
        first, second = compute_control_points(knots)

        np.testing.assert_allclose(first, [[1 / 6, 5.0], [2 / 3, 10.0]], atol=1e-12)
        np.testing.assert_allclose(second, [[1 / 3, 10.0], [5 / 6, 5.0]], atol=1e-12)

    def test_three_knots_residual(self):
        """测试第一控制点满足方程组"""
        knots = three_knot_path()
        first, _ = compute_control_points(knots)
        residual = dense_matrix(2) @ first - build_rhs(knots)
        np.testing.assert_allclose(residual, 0, atol=1e-12)

    def test_output_lengths(self, random_knots):
        """测试输出长度为节点数减一"""
        first, second = compute_control_points(random_knots)
        assert first.shape == (len(random_knots) - 1, 2)
        assert second.shape == (len(random_knots) - 1, 2)

    def test_c1_continuity(self, random_knots):
        """测试内部节点处一阶导数连续"""
        first, second = compute_control_points(random_knots)
        d1_start, d1_end, _, _ = segment_derivatives(random_knots, first, second)
        np.testing.assert_allclose(d1_end[:-1], d1_start[1:], rtol=1e-9, atol=1e-8)

    def test_c2_continuity(self, random_knots):
        """测试内部节点处二阶导数连续"""
        first, second = compute_control_points(random_knots)
        _, _, d2_start, d2_end = segment_derivatives(random_knots, first, second)
        np.testing.assert_allclose(d2_end[:-1], d2_start[1:], rtol=1e-9, atol=1e-7)

    def test_natural_end_conditions(self, random_knots):
        """测试两端二阶导数为零"""
        first, second = compute_control_points(random_knots)
        _, _, d2_start, d2_end = segment_derivatives(random_knots, first, second)
        np.testing.assert_allclose(d2_start[0], 0, atol=1e-8)
        np.testing.assert_allclose(d2_end[-1], 0, atol=1e-8)

    def test_symmetric_input(self):
        """测试对称输入得到镜像对称的控制点"""
        knots = knots_from_values(symmetric_values())
        first, second = compute_control_points(knots)

        # 关于 x=0.5 镜像后，第 i 段的第一控制点对应第 n-1-i 段的第二控制点
        np.testing.assert_allclose(first[:, 0], 1 - second[::-1, 0], atol=1e-12)
        np.testing.assert_allclose(first[:, 1], second[::-1, 1], atol=1e-9)

    def test_idempotent(self, random_knots):
        """测试重复调用结果完全一致"""
        first_a, second_a = compute_control_points(random_knots)
        first_b, second_b = compute_control_points(random_knots)
        assert np.array_equal(first_a, first_b)
        assert np.array_equal(second_a, second_b)

    def test_input_not_modified(self, random_knots):
        """测试不修改输入节点"""
        original = random_knots.copy()
        compute_control_points(random_knots)
        assert np.array_equal(random_knots, original)

    def test_point2d_input(self):
        """测试 Point2D 列表输入"""
        knots = [Point2D(0.0, 0.0), Point2D(0.5, 10.0), Point2D(1.0, 0.0)]
        first, second = compute_control_points(knots)
        points = as_points(first)
        assert isinstance(points[0], Point2D)
        assert points[1] == pytest.approx(Point2D(2 / 3, 10.0))

    def test_non_uniform_x(self):
        """测试任意 x 坐标（非均匀分布）"""
        knots = np.array([[0.0, 1.0], [0.1, 3.0], [2.0, -1.0], [2.5, 4.0]])
        first, second = compute_control_points(knots)
        d1_start, d1_end, d2_start, d2_end = segment_derivatives(knots, first, second)
        np.testing.assert_allclose(d1_end[:-1], d1_start[1:], atol=1e-10)
        np.testing.assert_allclose(d2_end[:-1], d2_start[1:], atol=1e-10)


class TestOutputBuffers:
    """预分配输出缓冲区测试"""

    def test_buffers_filled(self, random_knots):
        """测试结果写入缓冲区"""
        n = len(random_knots) - 1
        first_buf = np.zeros((n, 2))
        second_buf = np.zeros((n, 2))
        first, second = compute_control_points(random_knots, out=(first_buf, second_buf))
        np.testing.assert_array_equal(first_buf, first)
        np.testing.assert_array_equal(second_buf, second)

    def test_bad_output_length(self, random_knots):
        """测试缓冲区长度不匹配"""
        n = len(random_knots) - 1
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points(random_knots, out=(np.zeros((n, 2)), np.zeros((n + 1, 2))))
        assert exc_info.value.reason == InvalidArgumentError.BAD_OUTPUT_LENGTH

    def test_missing_buffer(self, random_knots):
        """测试缓冲区缺失"""
        n = len(random_knots) - 1
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points(random_knots, out=(np.zeros((n, 2)), None))
        assert exc_info.value.reason == InvalidArgumentError.BAD_OUTPUT_LENGTH

    def test_single_buffer_rejected_before_write(self):
        """测试只传一个缓冲区时不写入任何结果"""
        buf = np.zeros((2, 2))
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points(three_knot_path(), out=(buf,))
        assert exc_info.value.reason == InvalidArgumentError.BAD_OUTPUT_LENGTH
        np.testing.assert_array_equal(buf, 0.0)

    def test_list_buffers(self):
        """测试普通列表缓冲区"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points([(0, 0), (1, 1)], out=([[0.0, 0.0]], [[0.0, 0.0]]))
        assert exc_info.value.reason == InvalidArgumentError.BAD_OUTPUT_LENGTH

    def test_read_only_buffer(self):
        """测试只读缓冲区"""
        first_buf = np.zeros((2, 2))
        second_buf = np.zeros((2, 2))
        second_buf.flags.writeable = False
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points(three_knot_path(), out=(first_buf, second_buf))
        assert exc_info.value.reason == InvalidArgumentError.BAD_OUTPUT_LENGTH
        np.testing.assert_array_equal(first_buf, 0.0)


class TestEdgeCases:
    """参数校验测试"""

    def test_none_knots(self):
        """测试 knots 为 None"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points(None)
        assert exc_info.value.reason == InvalidArgumentError.NULL_KNOTS

    def test_single_knot(self):
        """测试单个节点"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points([(0.0, 0.0)])
        assert exc_info.value.reason == InvalidArgumentError.INSUFFICIENT_KNOTS

    def test_empty_knots(self):
        """测试空节点序列"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points([])
        assert exc_info.value.reason == InvalidArgumentError.INSUFFICIENT_KNOTS

    def test_ragged_knots(self):
        """测试形状非法的节点"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points([(0.0, 0.0), (1.0,), (2.0, 1.0)])
        assert exc_info.value.reason == InvalidArgumentError.BAD_KNOT_SHAPE

    def test_is_value_error(self):
        """测试异常可作为 ValueError 捕获"""
        with pytest.raises(ValueError):
            compute_control_points([(0.0, 0.0)])

    def test_validation_before_buffers(self):
        """测试节点校验先于缓冲区校验"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points(None, out=(np.zeros(3), np.zeros(3)))
        assert exc_info.value.reason == InvalidArgumentError.NULL_KNOTS

    def test_error_message(self):
        """测试错误信息包含错误码与原因"""
        with pytest.raises(InvalidArgumentError) as exc_info:
            compute_control_points(None)
        assert "BS_INVALID_ARGUMENT" in str(exc_info.value)
        assert "NullKnots" in str(exc_info.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
