import logging

from core import (
    RPNEvaluator, EmptyExpressionError, CalculatorError, tokenize, to_postfix
)

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """文本 -> Token -> 后缀Token -> float；每次调用互不影响，不做缓存"""

    def __init__(self, allow_partial=True):
        self.rpn_evaluator = RPNEvaluator
        self.allow_partial = allow_partial

    def tokenize(self, expression: str) -> list:
        return tokenize(expression)

    def to_postfix(self, expression: str) -> list:
        return to_postfix(self.tokenize(expression))

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式文本
        Returns:
            计算结果
        Raises:
            CalculatorError: 空表达式、非法数字、括号不匹配或无结果
        """
        if not expression:
            raise EmptyExpressionError()

        postfix = self.to_postfix(expression)

        try:
            return self.rpn_evaluator.evaluate(postfix, allow_partial=self.allow_partial)
        except CalculatorError as e:
            logger.debug(f"Error evaluating expression '{expression[:50]}': {e}")
            raise


_default_evaluator = ExpressionEvaluator()


def evaluate(expression_text: str) -> float:
    """使用默认配置（允许部分结果）求值"""
    return _default_evaluator.evaluate(expression_text)
