"""
exceptions - 样条求解错误类型

所有参数校验都在计算开始前完成，校验失败即抛出，不产生部分结果。
"""


class BezierSplineError(Exception):
    """bezier_spline 异常基类"""

    def __init__(self, message: str, error_code: str = "BS_GENERAL"):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class InvalidArgumentError(BezierSplineError, ValueError):
    """
    调用方违反接口约定时抛出。

    Attributes:
        reason: 错误原因，取值为下列常量之一
    """

    NULL_KNOTS = "NullKnots"
    INSUFFICIENT_KNOTS = "InsufficientKnots"
    BAD_OUTPUT_LENGTH = "BadOutputLength"
    BAD_KNOT_SHAPE = "BadKnotShape"

    def __init__(self, reason: str, message: str):
        self.reason = reason
        super().__init__(f"{reason}: {message}", "BS_INVALID_ARGUMENT")
