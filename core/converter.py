"""core/converter.py - 中缀Token序列转后缀（逆波兰）序列"""
import logging

from core.token_system import TokenType, is_number, is_op_or_paren, precedence

logger = logging.getLogger(__name__)


def is_lower_or_equal_precedence(token, stack_top):
    """
    栈顶操作符是否应在 token 入栈前弹出。
    括号不参与比较；NEG 与 NEG、^ 与 ^ 相遇时不弹出（右结合）。
    """
    if not is_op_or_paren(token) or not is_op_or_paren(stack_top):
        return False

    if token.type in (TokenType.LPAREN, TokenType.RPAREN):
        return False

    if token.type == stack_top.type and token.type in (TokenType.NEGATE, TokenType.CARET):
        return False

    return precedence(token) <= precedence(stack_top)


def to_postfix(tokens):
    """调度场算法：中缀Token列表 -> 后缀Token列表"""
    output = []
    op_stack = []

    for token in tokens:
        if is_number(token):
            output.append(token)
            continue

        # 栈顶优先级不低于当前Token时弹出到输出
        while op_stack and is_lower_or_equal_precedence(token, op_stack[-1]):
            output.append(op_stack.pop())

        if token.type == TokenType.RPAREN:
            while op_stack:
                op = op_stack.pop()
                if op.type == TokenType.LPAREN:
                    break
                output.append(op)
            continue

        op_stack.append(token)

    # 剩余操作符按后进先出输出；未匹配的 '(' 也会进入输出，由求值器检查
    output.extend(reversed(op_stack))

    logger.debug(f"Postfix: {' '.join(t.name for t in output)}")
    return output
