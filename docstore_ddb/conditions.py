"""Builds AND-chained DynamoDB condition expressions from plain mappings."""

from typing import Any, Dict, Optional

from docstore_ddb.types import ConditionExpression, ConditionOperators, ConditionValues

from .exception import ConditionMismatchException, UnsupportedOperatorException

COMPARATORS = frozenset(("=", "<>", "<", "<=", ">", ">="))


def build_condition_expression(
    expression: ConditionValues, comparison: ConditionOperators
) -> ConditionExpression:
    """Combine comparison values and operators into one condition expression.

    Each attribute in ``expression`` becomes a clause ``#n<i> <op> :v<i>``,
    where ``i`` is the attribute's position; clauses are joined with ``AND``
    in the order the attributes were given. Attribute names and values are
    bound through placeholders because DynamoDB rejects raw names and values
    inside expression strings, and positional placeholders stay valid for
    names holding characters such as ``-``, ``.`` or spaces.

    Raises ``ConditionMismatchException`` when the two mappings do not share
    the same keys, and ``UnsupportedOperatorException`` for operators that
    are not DynamoDB comparators.
    """
    missing_operators = [key for key in expression if key not in comparison]
    missing_values = [key for key in comparison if key not in expression]
    if missing_operators or missing_values:
        raise ConditionMismatchException(
            f"condition keys do not match: no operator for {missing_operators}, "
            f"no value for {missing_values}"
        )

    clauses = []
    names = {}
    values = {}
    for position, (key, value) in enumerate(expression.items()):
        operator = comparison[key]
        if operator not in COMPARATORS:
            raise UnsupportedOperatorException(
                f"operator {operator!r} for '{key}' not supported; expected one of {sorted(COMPARATORS)}"
            )
        name_placeholder = f"#n{position}"
        value_placeholder = f":v{position}"
        names[name_placeholder] = key
        values[value_placeholder] = value
        clauses.append(f"{name_placeholder} {operator} {value_placeholder}")

    return {"expression": " AND ".join(clauses), "names": names, "values": values}


def condition_params(
    expression: Optional[ConditionValues], comparison: Optional[ConditionOperators]
) -> Dict[str, Any]:
    if not expression and not comparison:
        return {}
    condition = build_condition_expression(expression or {}, comparison or {})
    return {
        "ConditionExpression": condition["expression"],
        "ExpressionAttributeNames": condition["names"],
        "ExpressionAttributeValues": condition["values"],
    }
