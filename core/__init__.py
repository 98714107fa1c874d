"""核心模块 - Token系统、分词器、后缀转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, NEGATION_MARKER, PRECEDENCE, precedence
)
from .errors import (
    CalculatorError, EmptyExpressionError, InvalidNumberError,
    UnmatchedParenthesesError, InvalidExpressionError, StackUnderflowError
)
from .tokenizer import tokenize, is_unary_neg, should_push_buffer
from .converter import to_postfix
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'NEGATION_MARKER', 'PRECEDENCE', 'precedence',
    'CalculatorError', 'EmptyExpressionError', 'InvalidNumberError',
    'UnmatchedParenthesesError', 'InvalidExpressionError', 'StackUnderflowError',
    'tokenize', 'is_unary_neg', 'should_push_buffer', 'to_postfix',
    'RPNEvaluator', 'Operators'
]
