"""Serialize Condition ASTs back to CLDR condition text.

Output uses the modern syntax ('=', '!=', '%') regardless of the syntax the
condition was parsed from, so the text is canonical: structurally equal
conditions serialize identically and re-parse to an equal AST.

Python 3.13+. Zero external dependencies.
"""

from .ast import And, Comparison, Condition, Expression, Not, Or, Range, RangeItem, Value

__all__ = ["serialize_condition"]


def serialize_condition(condition: Condition | None) -> str:
    """Render a condition as canonical CLDR text.

    Args:
        condition: Condition to render; None renders as the empty string

    Returns:
        Condition text without sample annotations

    Raises:
        ValueError: If the condition nests Or inside And, or negates anything
            but a Comparison; the CLDR grammar has no parentheses to express
            either.

    Example:
        >>> from pluralengine.syntax.parser import parse_condition
        >>> serialize_condition(parse_condition("n mod 10 in 3..4,9 and n not in 10..19"))
        'n % 10 = 3..4,9 and n != 10..19'
    """
    if condition is None:
        return ""
    return _serialize(condition, nested_in_and=False)


def _serialize(node: Condition, *, nested_in_and: bool) -> str:
    match node:
        case Or(conditions=conditions):
            if nested_in_and:
                msg = "Or inside And cannot be expressed without parentheses"
                raise ValueError(msg)
            return " or ".join(_serialize(c, nested_in_and=False) for c in conditions)
        case And(conditions=conditions):
            return " and ".join(_serialize(c, nested_in_and=True) for c in conditions)
        case Not(condition=Comparison() as comparison):
            return _serialize_comparison(comparison, negated=True)
        case Not():
            msg = "Only comparisons can be negated"
            raise ValueError(msg)
        case Comparison():
            return _serialize_comparison(node, negated=False)


def _serialize_comparison(node: Comparison, *, negated: bool) -> str:
    items = ",".join(_serialize_item(item) for item in node.items)
    expression = _serialize_expression(node.expression)
    if node.within:
        keyword = "not within" if negated else "within"
        return f"{expression} {keyword} {items}"
    operator = "!=" if negated else "="
    return f"{expression} {operator} {items}"


def _serialize_expression(expression: Expression) -> str:
    if expression.modulus is None:
        return str(expression.operand)
    return f"{expression.operand} % {expression.modulus}"


def _serialize_item(item: RangeItem) -> str:
    if isinstance(item, Range):
        return f"{item.low}..{item.high}"
    if isinstance(item, Value):
        return str(item.number)
    msg = f"Unknown range list item: {item!r}"
    raise TypeError(msg)
