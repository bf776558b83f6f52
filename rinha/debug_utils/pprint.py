import json
import re

from rinha.syntax.terms import (
    BinaryOp,
    IntLiteral,
    StrLiteral,
    BoolLiteral,
    Print,
    Binary,
    If,
    Let,
    Var,
    Function,
    Call,
    Program,
)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_KEYWORD = "\033[90m"
COLOR_NAME = "\033[94m"
COLOR_LITERAL = "\033[92m"
COLOR_OPERATOR = "\033[95m"

_ANSI = re.compile(r"\033\[[0-9;]*m")

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 32,
    "display_legend": False,
    "color_keywords": True,
    "color_names": True,
    "color_literals": True,
    "color_operators": True,
}

OPERATOR_SYMBOLS = {
    BinaryOp.ADD: "+",
    BinaryOp.SUB: "-",
    BinaryOp.LT: "<",
}


# ----------------- Colorize utility -----------------
def colorize(text: str, color: str, option: str, options: dict = DEFAULT_OPTIONS) -> str:
    if options.get(option, True):
        return f"{color}{text}{RESET}"
    return text


def visible_length(text: str) -> int:
    return len(_ANSI.sub("", text))


def _atom(term, options: dict):
    """Render a leaf term, or None if `term` has children."""
    if isinstance(term, IntLiteral):
        return colorize(str(term.value), COLOR_LITERAL, "color_literals", options)
    if isinstance(term, StrLiteral):
        return colorize(json.dumps(term.value), COLOR_LITERAL, "color_literals", options)
    if isinstance(term, BoolLiteral):
        return colorize("true" if term.value else "false", COLOR_LITERAL, "color_literals", options)
    if isinstance(term, Var):
        return colorize(term.name, COLOR_NAME, "color_names", options)
    return None


def _head_and_children(term, options: dict):
    """Split a compound term into its head text and child terms/texts."""
    keyword = lambda k: colorize(k, COLOR_KEYWORD, "color_keywords", options)
    name = lambda n: colorize(n, COLOR_NAME, "color_names", options)

    if isinstance(term, Print):
        return keyword("print"), [term.value]
    if isinstance(term, Binary):
        op = colorize(OPERATOR_SYMBOLS[term.op], COLOR_OPERATOR, "color_operators", options)
        return op, [term.lhs, term.rhs]
    if isinstance(term, If):
        return keyword("if"), [term.condition, term.then, term.otherwise]
    if isinstance(term, Let):
        return keyword("let"), [name(term.name), term.value, term.next]
    if isinstance(term, Function):
        params = "(" + " ".join(name(p) for p in term.parameters) + ")"
        return keyword("fn"), [params, term.body]
    if isinstance(term, Call):
        return None, [term.callee, *term.arguments]
    raise TypeError(f"Cannot pretty-print {term!r}")


# ----------------- Pretty printer -----------------
def pprint_term(
    term,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    if isinstance(term, Program):
        return pprint_term(term.expression, indent, options, _current_depth)

    pad = "  " * indent
    legend_str = ""
    if options.get("display_legend", True) and indent == 0 and _current_depth == 0:
        legend_items = [
            f"{COLOR_KEYWORD}Keyword{RESET}",
            f"{COLOR_NAME}Name{RESET}",
            f"{COLOR_LITERAL}Literal{RESET}",
            f"{COLOR_OPERATOR}Operator{RESET}",
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    atom = _atom(term, options)
    if atom is not None:
        return legend_str + atom

    if _current_depth >= options.get("max_depth", 32):
        return legend_str + "..."

    head, children = _head_and_children(term, options)
    parts = [] if head is None else [head]
    for child in children:
        if isinstance(child, str):
            parts.append(child)
        else:
            parts.append(pprint_term(child, indent + 1, options, _current_depth + 1))

    single_line = "(" + " ".join(parts) + ")"
    if "\n" not in single_line and visible_length(single_line) + indent * 2 <= options.get("max_line_length", 80):
        return legend_str + single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append(pad + "  " + part)
    aligned_lines[-1] += ")"
    return legend_str + "\n".join(aligned_lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except (TypeError, ValueError):
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}
