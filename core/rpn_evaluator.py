"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import (
    InvalidExpressionError, InvalidNumberError, StackUnderflowError, UnmatchedParenthesesError
)
from core.operators import Operators, apply_operator
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀（RPN）Token序列的值"""

    @staticmethod
    def _pop(stack, token):
        """值栈出栈；栈空属于内部故障"""
        if not stack:
            raise StackUnderflowError(token.name, len(stack))
        return stack.pop()

    @staticmethod
    def _parse_number(token):
        try:
            return float(token.name)
        except ValueError:
            raise InvalidNumberError(token.name) from None

    @staticmethod
    def evaluate(token_sequence, allow_partial=True):
        """
        评估RPN表达式
        Args:
            token_sequence: 后缀Token序列（to_postfix 的输出）
            allow_partial: 是否允许栈中剩余多个值（为 True 时返回栈底的值）
        Returns:
            float 结果
        Raises:
            UnmatchedParenthesesError: 序列中残留 '('
            InvalidNumberError: 数字Token无法解析
            InvalidExpressionError: 栈空，或 allow_partial=False 时剩余多个值
            StackUnderflowError: 内部故障，序列本身畸形
        """
        if any(token.type == TokenType.LPAREN for token in token_sequence):
            raise UnmatchedParenthesesError()

        stack = []

        for token in token_sequence:
            # ================== 一元负号 ==================
            if token.type == TokenType.NEGATE:
                operand = RPNEvaluator._pop(stack, token)
                stack.append(Operators.neg(operand))
                continue

            # ================== 数字 ==================
            if token.type == TokenType.NUMBER:
                stack.append(RPNEvaluator._parse_number(token))
                continue

            # ================== 二元操作符 ==================
            rhs = RPNEvaluator._pop(stack, token)
            lhs = RPNEvaluator._pop(stack, token)
            stack.append(apply_operator(token, lhs, rhs))

        # 返回结果处理
        if len(stack) == 0:
            logger.debug("Empty stack after evaluation")
            raise InvalidExpressionError()

        if len(stack) > 1:
            if not allow_partial:
                logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
                raise InvalidExpressionError()
            logger.debug(f"Partial expression with {len(stack)} stack elements, using the first")

        return stack[0]
