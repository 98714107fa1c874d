"""core/operators.py"""
import numpy as np

from core.token_system import TokenType


class Operators:
    """所有操作符的静态方法集合（IEEE-754 语义：除零得 inf/nan，溢出得 inf）"""

    @staticmethod
    def _as_float(value):
        return np.float64(value)

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        """一元负号"""
        return float(-Operators._as_float(operand))

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return float(Operators._as_float(operand1) + Operators._as_float(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return float(Operators._as_float(operand1) - Operators._as_float(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return float(Operators._as_float(operand1) * Operators._as_float(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除法操作符；不做除零保护"""
        with np.errstate(all='ignore'):
            return float(np.divide(Operators._as_float(operand1), Operators._as_float(operand2)))

    @staticmethod
    def pow(operand1, operand2):
        """幂运算：operand1 ** operand2；负底数的小数次幂得到 nan"""
        with np.errstate(all='ignore'):
            return float(np.power(Operators._as_float(operand1), Operators._as_float(operand2)))


# 二元操作符Token类型 -> Operators方法名
BINARY_OPERATOR_METHODS = {
    TokenType.PLUS: 'add',
    TokenType.MINUS: 'sub',
    TokenType.STAR: 'mul',
    TokenType.SLASH: 'div',
    TokenType.CARET: 'pow',
}


def apply_operator(token, lhs, rhs):
    """按Token类型调用对应的二元方法"""
    op_method = getattr(Operators, BINARY_OPERATOR_METHODS[token.type])
    return op_method(lhs, rhs)
