"""core/tokenizer.py - 中缀表达式分词器"""
import logging

from core.token_system import (
    TokenType, Token, NEGATE, OPERATOR_SYMBOLS, is_op_or_paren
)

logger = logging.getLogger(__name__)

NUMERIC_CHARS = '0123456789.'


def _holds_number(buffer):
    """缓冲区是否已经是一个（可能未完成的）数字字面量"""
    return any(c in NUMERIC_CHARS for c in buffer)


def is_unary_neg(tokens, buffer):
    """
    判断缓冲区中的 '-' 是否为一元负号。

    满足以下任一条件即为一元：
    - 表达式开头（尚未产出任何Token）
    - 上一个Token是一元负号（连续负号）
    - 上一个Token是操作符或左括号（右括号除外）
    """
    if buffer != '-':
        return False

    if not tokens:
        return True

    latest_token = tokens[-1]
    if latest_token.type == TokenType.RPAREN:
        return False
    if latest_token.type == TokenType.NEGATE:
        return True

    return is_op_or_paren(latest_token)


def should_push_buffer(tokens, buffer):
    """待定的一元 '-' 不输出，其余非空缓冲区都输出"""
    if is_unary_neg(tokens, buffer):
        return False
    return bool(buffer)


def tokenize(problem):
    """
    将表达式字符串分解为Token列表
    Args:
        problem: 中缀表达式文本
    Returns:
        Token列表（含隐式乘法 '*' 与一元负号 NEG）
    """
    tokens = []
    buffer = []

    def flush():
        tokens.append(Token.from_text(''.join(buffer)))
        buffer.clear()

    for char in problem:
        if char in NUMERIC_CHARS:
            text = ''.join(buffer)
            # 缓冲区里是操作符/括号时先输出；待定的一元负号则并入数字
            if should_push_buffer(tokens, text) and not _holds_number(text):
                flush()
            buffer.append(char)

        elif char in OPERATOR_SYMBOLS:
            text = ''.join(buffer)

            # 5(2+2) -> 5 * (2+2)
            if char == '(' and (_holds_number(text) or text == ')'):
                flush()
                buffer.append('*')
                text = '*'

            if should_push_buffer(tokens, text):
                flush()
                text = ''

            # -(2+2) -> NEG (2+2) ; --4 -> NEG -4
            if char in '(-' and text == '-':
                tokens.append(NEGATE)
                buffer.clear()

            buffer.append(char)

        # 空白等其它字符直接忽略

    if buffer:
        flush()

    logger.debug(f"Tokens: {' '.join(t.name for t in tokens)}")
    return tokens
