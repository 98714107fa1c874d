"""主程序入口 - 交互式算术表达式计算器"""
import argparse
import logging
import sys

from config.config import *
from calculator import ExpressionEvaluator
from core import CalculatorError

logger = logging.getLogger(__name__)


def normalize_input(raw_line):
    """去掉首尾空白并转为小写"""
    return raw_line.strip().lower()


def is_quit_command(command):
    return command in CALCULATOR_CONFIG['quit_commands']


def evaluate_line(evaluator, line):
    """求值一行输入，返回要打印的文本"""
    try:
        result = evaluator.evaluate(line)
    except CalculatorError as e:
        return f"Error: {e}"
    return f"Result: {result}"


def run_repl(evaluator, prompt=None, read_line=None, write=print):
    """
    交互循环：读一行 -> 规范化 -> q/quit 退出 -> 求值并打印。
    用户错误只打印，不会结束循环；EOF 结束循环。
    """
    prompt = CALCULATOR_CONFIG['prompt'] if prompt is None else prompt
    read_line = read_line or input

    while True:
        try:
            raw_line = read_line(prompt)
        except EOFError:
            logger.debug("EOF on input, leaving REPL")
            return

        line = normalize_input(raw_line)
        if is_quit_command(line):
            return

        write(evaluate_line(evaluator, line))


def evaluate_once(evaluator, expression, write=print):
    """单次求值模式，返回进程退出码"""
    try:
        result = evaluator.evaluate(normalize_input(expression))
    except CalculatorError as e:
        write(f"Error: {e}")
        return 1
    write(f"Result: {result}")
    return 0


def main(args):
    level = LOGGING_CONFIG['debug_level'] if args.debug else LOGGING_CONFIG['level']
    logging.basicConfig(level=level, format=LOGGING_CONFIG['format'])

    validate_config()

    allow_partial = CALCULATOR_CONFIG['allow_partial'] and not args.strict
    evaluator = ExpressionEvaluator(allow_partial=allow_partial)
    logger.info(f"Evaluator ready (allow_partial={allow_partial})")

    if args.expr is not None:
        return evaluate_once(evaluator, args.expr)

    run_repl(evaluator, prompt=args.prompt)
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Interactive arithmetic expression calculator")

    parser.add_argument(
        "--expr",
        type=str,
        default=None,
        help="Evaluate a single expression and exit instead of starting the prompt"
    )
    parser.add_argument(
        "--prompt",
        type=str,
        default=CALCULATOR_CONFIG['prompt'],
        help="Prompt text shown by the interactive loop"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report leftover operands as an invalid expression instead of returning the first value"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log the token and postfix sequences of every evaluation"
    )
    return parser.parse_args(argv)


def cli():
    sys.exit(main(parse_args()))


if __name__ == "__main__":
    cli()
