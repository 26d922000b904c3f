from arithtree.errors import EvaluationError
from arithtree.node import BinaryOperator, BinaryOpNode, Node, NumberNode


def divide(left: int, right: int) -> int:
    # truncates toward zero, like C integer division
    if right == 0:
        raise EvaluationError("division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def apply(operator: BinaryOperator, left: int, right: int) -> int:
    match operator:
        case BinaryOperator.Add:
            return left + right
        case BinaryOperator.Sub:
            return left - right
        case BinaryOperator.Mul:
            return left * right
        case BinaryOperator.Div:
            return divide(left, right)
    raise ValueError(f"invalid operator: {operator!r}")


def evaluate(node: Node) -> int:
    """Evaluate ``node`` in post-order with an explicit stack.

    Operator chains parse into trees as deep as the chain is long, so the
    walk does not recurse.
    """
    values = []
    stack = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        match current:
            case NumberNode(value=value):
                values.append(value)
            case BinaryOpNode(operator=operator, left=left, right=right):
                if expanded:
                    right_value = values.pop()
                    left_value = values.pop()
                    values.append(apply(operator, left_value, right_value))
                else:
                    stack.append((current, True))
                    stack.append((right, False))
                    stack.append((left, False))
            case _:
                raise TypeError(f"invalid node: {current!r}")
    return values.pop()
