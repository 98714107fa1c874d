"""core/errors.py"""


class CalculatorError(ValueError):
    """用户可见的求值错误基类"""

    message = "calculator error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class EmptyExpressionError(CalculatorError):
    message = "empty expression"


class InvalidNumberError(CalculatorError):
    """数字Token无法解析为浮点数"""

    def __init__(self, text):
        self.text = text
        super().__init__(f"invalid number: ({text})")


class UnmatchedParenthesesError(CalculatorError):
    message = "unmatched parentheses"


class InvalidExpressionError(CalculatorError):
    message = "invalid expression"


class StackUnderflowError(RuntimeError):
    """
    内部故障：对空的值栈出栈。
    只会由畸形的后缀序列触发，不属于用户错误，不要当作 CalculatorError 处理。
    """

    def __init__(self, token_name, depth=0):
        self.token_name = token_name
        self.depth = depth
        super().__init__(f"value stack underflow at '{token_name}' (stack depth {depth})")
