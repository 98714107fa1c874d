"""core/token_system.py"""
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    NUMBER = "number"    # 数字字面量
    PLUS = "plus"        # +
    MINUS = "minus"      # - (二元减法)
    STAR = "star"        # *
    SLASH = "slash"      # /
    CARET = "caret"      # ^
    LPAREN = "lparen"    # (
    RPAREN = "rparen"    # )
    NEGATE = "negate"    # 一元负号（合成Token，不会出现在用户输入中）


NEGATION_MARKER = 'NEG'


class Token:
    def __init__(self, token_type, name, arity=0):
        self.type = token_type
        self.name = name
        self.arity = arity

    @classmethod
    def number(cls, text):
        return cls(TokenType.NUMBER, text)

    @classmethod
    def from_text(cls, text):
        """缓冲区文本 -> Token；非运算符/括号的文本一律视为数字（由求值阶段校验）"""
        definition = TOKEN_DEFINITIONS.get(text)
        if definition is not None:
            return definition
        return cls.number(text)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.name == other.name

    def __hash__(self):
        return hash((self.type, self.name))

    def __repr__(self):
        return f"Token({self.type.name}, {self.name!r})"


# Token定义字典（数字Token按字面量动态创建）
TOKEN_DEFINITIONS = {
    # 二元操作符
    '+': Token(TokenType.PLUS, '+', arity=2),
    '-': Token(TokenType.MINUS, '-', arity=2),
    '*': Token(TokenType.STAR, '*', arity=2),
    '/': Token(TokenType.SLASH, '/', arity=2),
    '^': Token(TokenType.CARET, '^', arity=2),

    # 括号
    '(': Token(TokenType.LPAREN, '('),
    ')': Token(TokenType.RPAREN, ')'),

    # 一元负号
    NEGATION_MARKER: Token(TokenType.NEGATE, NEGATION_MARKER, arity=1),
}

NEGATE = TOKEN_DEFINITIONS[NEGATION_MARKER]
LPAREN = TOKEN_DEFINITIONS['(']
RPAREN = TOKEN_DEFINITIONS[')']
STAR = TOKEN_DEFINITIONS['*']

OPERATOR_SYMBOLS = '+-*/^()'

BINARY_OPERATORS = frozenset({
    TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH, TokenType.CARET,
})

# 优先级表：一元负号结合最紧
PRECEDENCE = MappingProxyType({
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.STAR: 2,
    TokenType.SLASH: 2,
    TokenType.CARET: 3,
    TokenType.NEGATE: 4,
})


def is_number(token):
    return token.type == TokenType.NUMBER


def is_paren(token):
    return token.type in (TokenType.LPAREN, TokenType.RPAREN)


def is_operator(token):
    """二元操作符或一元负号"""
    return token.type in BINARY_OPERATORS or token.type == TokenType.NEGATE


def is_op_or_paren(token):
    return is_operator(token) or is_paren(token)


def precedence(token):
    """括号与数字的优先级为0"""
    return PRECEDENCE.get(token.type, 0)
