"""
Inline calculator.

Decides whether a query looks like arithmetic and evaluates it with a
restricted AST walker. Only numeric literals, arithmetic operators, a small
set of math functions and the constants pi, e and tau are accepted; any
other syntax is an EvaluationError and the router falls back to app search.
"""

import ast
import logging
import math
import operator
import re
from typing import Callable, Dict

from ..errors import EvaluationError


logger = logging.getLogger(__name__)

OPERATOR_CHARS = frozenset("+-*/×÷xX^()%")

# "x" and "X" only act as multiplication between operands, so names such
# as "exp" or "max" survive normalization.
_TIMES_LETTER = re.compile(r"(?<=[\d)\s.])[xX](?=\s*[\d(.])")

_BINARY_OPS: Dict[type, Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

_UNARY_OPS: Dict[type, Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

_FUNCTIONS: Dict[str, Callable[..., float]] = {
    "sqrt": math.sqrt,
    "abs": abs,
    "round": round,
    "floor": math.floor,
    "ceil": math.ceil,
    "exp": math.exp,
    "ln": math.log,
    "log": math.log10,
    "log10": math.log10,
    "log2": math.log2,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
}

_CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
}

# Keeps "9^9^9" style input from hanging the launcher
MAX_EXPONENT = 10_000

# Decimal exponent of the largest finite float
MAX_RESULT_DIGITS = 308


def looks_like_calculation(query: str) -> bool:
    """Return True when a query should be tried as arithmetic.

    A query qualifies when it contains a digit and either contains an
    arithmetic operator or parenthesis, or parses entirely as a number.
    """
    if not any(ch.isdigit() for ch in query):
        return False
    if any(ch in OPERATOR_CHARS for ch in query):
        return True
    try:
        float(query.strip())
    except ValueError:
        return False
    return True


def normalize_expression(expression: str) -> str:
    """Rewrite alternate operator glyphs into Python arithmetic syntax."""
    expr = expression.replace("×", "*").replace("÷", "/")
    expr = _TIMES_LETTER.sub("*", expr)
    return expr.replace("^", "**")


def _check_power(base: float, exponent: float) -> None:
    """Reject powers whose result could not be a finite float.

    Integer powers are exact in Python, so ``(9^9999)^999`` would otherwise
    spend seconds building a huge int before failing to convert.
    """
    if abs(exponent) > MAX_EXPONENT:
        raise ValueError("exponent too large")
    if base in (0, 1, -1):
        return
    if exponent * math.log10(abs(base)) > MAX_RESULT_DIGITS:
        raise ValueError("result too large")


def _eval_node(node: ast.AST) -> float:
    if isinstance(node, ast.Expression):
        return _eval_node(node.body)

    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise ValueError(f"unsupported literal {node.value!r}")
        return node.value

    if isinstance(node, ast.BinOp):
        op = _BINARY_OPS.get(type(node.op))
        if op is None:
            raise ValueError(f"unsupported operator {type(node.op).__name__}")
        left = _eval_node(node.left)
        right = _eval_node(node.right)
        if op is operator.pow:
            _check_power(left, right)
        return op(left, right)

    if isinstance(node, ast.UnaryOp):
        op = _UNARY_OPS.get(type(node.op))
        if op is None:
            raise ValueError(f"unsupported operator {type(node.op).__name__}")
        return op(_eval_node(node.operand))

    if isinstance(node, ast.Name):
        if node.id in _CONSTANTS:
            return _CONSTANTS[node.id]
        raise ValueError(f"unknown name '{node.id}'")

    if isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name) or node.func.id not in _FUNCTIONS:
            raise ValueError("unsupported function call")
        if node.keywords:
            raise ValueError("keyword arguments are not supported")
        args = [_eval_node(arg) for arg in node.args]
        return _FUNCTIONS[node.func.id](*args)

    raise ValueError(f"unsupported syntax {type(node).__name__}")


def evaluate(expression: str) -> float:
    """Evaluate an arithmetic expression.

    Args:
        expression: User input, e.g. "2 × (3 + 4)" or "2^10"

    Returns:
        The result as a finite float

    Raises:
        EvaluationError: For syntax errors, unsupported constructs,
            domain errors, division by zero and non-finite results
    """
    normalized = normalize_expression(expression.strip())
    try:
        tree = ast.parse(normalized, mode="eval")
        value = float(_eval_node(tree))
    except SyntaxError:
        raise EvaluationError(expression, "invalid syntax")
    except ZeroDivisionError:
        raise EvaluationError(expression, "division by zero")
    except (ValueError, TypeError, OverflowError) as e:
        raise EvaluationError(expression, str(e) or type(e).__name__)

    if not math.isfinite(value):
        raise EvaluationError(expression, "result is not a finite number")
    return value


def format_result(value: float, precision: int = 10) -> str:
    """Format a result for display.

    Whole numbers print without a fractional part. Other values print with
    ``precision`` decimals, trailing zeros and a trailing point removed.

    Examples:
        >>> format_result(4.0)
        '4'
        >>> format_result(2.5)
        '2.5'
        >>> format_result(1 / 3)
        '0.3333333333'
    """
    if value.is_integer():
        return str(int(value))
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    if text in ("", "-", "-0"):
        return "0"
    return text


def calculate(expression: str, precision: int = 10) -> str:
    """Evaluate and format an expression. Raises EvaluationError on failure."""
    value = evaluate(expression)
    result = format_result(value, precision)
    logger.debug(f"Calculated {expression!r} = {result}")
    return result
