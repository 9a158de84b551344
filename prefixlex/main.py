from typing import TextIO

import click

from prefixlex.errors import TokenizeError
from prefixlex.helper import error_message
from prefixlex.token import describe
from prefixlex.tokenize import tokenize


@click.command()
@click.argument("expression")
@click.option("-o", "--output", type=click.File("w"), default="-")
def main(expression: str, output: TextIO):
    """Print the tokens of EXPRESSION, one per line.

    \b
    An EXPRESSION starting with "-" must follow --:
    prefixlex -- "- 2 2"
    """
    try:
        tokens = tokenize(expression)
    except TokenizeError as e:
        click.echo(error_message(expression, e), err=True, nl=False)
        exit(1)
    for token in tokens:
        output.write(f"{describe(token)}\n")


if __name__ == "__main__":
    main()
