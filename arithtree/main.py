import logging
from typing import Optional, TextIO

import click

from arithtree.errors import ArithTreeError
from arithtree.evaluate import evaluate
from arithtree.helper import int_to_digits
from arithtree.node import render
from arithtree.parse import parse
from arithtree.tokenize import tokenize

logger = logging.getLogger(__name__)


def read_expression(expression: Optional[str], file: Optional[TextIO]) -> str:
    if expression is not None and file is not None:
        raise click.UsageError("give either EXPRESSION or --file, not both")
    if file is not None:
        return file.readline().rstrip("\r\n")
    if expression is None:
        raise click.UsageError("missing EXPRESSION or --file")
    return expression


@click.command()
@click.argument("expression", required=False)
@click.option("-f", "--file", type=click.File("r"), help="Read the expression from FILE.")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--tokens", is_flag=True, help="Print tokens instead of the tree.")
@click.option("--evaluate", "with_result", is_flag=True, help="Print the value too.")
@click.option("-v", "--verbose", is_flag=True)
def main(
    expression: Optional[str],
    file: Optional[TextIO],
    output: TextIO,
    tokens: bool,
    with_result: bool,
    verbose: bool,
):
    """Parse an integer arithmetic EXPRESSION and print its syntax tree."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    expression = read_expression(expression, file)
    logger.debug("expression %r", expression)

    if tokens:
        for token in tokenize(expression):
            output.write(f"{token}\n")
        return

    try:
        node = parse(expression)
        result = ["Syntax Tree:\n", render(node)]
        if with_result:
            result.append(f"Result: {int_to_digits(evaluate(node))}\n")
    except ArithTreeError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1)

    output.write("".join(result))


if __name__ == "__main__":
    main()
