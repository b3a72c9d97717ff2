"""Word comparison commands."""

import math

import click
from typing import Optional

from ...core.word import Word
from ...distances import mindist_ab
from ...exceptions import InvalidParameter


def register_distance_commands(cli: click.Group) -> None:
    """Register distance commands."""
    @cli.command("mindist", help="Lower-bounding distance between two SAX strings")
    @click.argument("word_a")
    @click.argument("word_b")
    @click.option("-c", "--cardinality", "c", type=int, required=True,
                  help="Cardinality of WORD_A (and WORD_B unless --cardinality-b)")
    @click.option("--cardinality-b", "c_b", type=int, default=None,
                  help="Cardinality of WORD_B")
    @click.option("--source-length", type=int, default=None,
                  help="Raw samples behind each word (defaults to the word length)")
    def mindist(word_a: str, word_b: str, c: int, c_b: Optional[int],
                source_length: Optional[int]):
        """Print distance, above and below for WORD_A and WORD_B.

        Examples:

        \b
            symtseries mindist abcd dcba -c 4 --source-length 64
            symtseries mindist abcd aaap -c 4 --cardinality-b 16
        """
        try:
            a = Word.from_string(word_a, c)
            b = Word.from_string(word_b, c if c_b is None else c_b)
            if source_length is not None:
                a = Word(a.symbols, a.cardinality, source_length)
                b = Word(b.symbols, b.cardinality, source_length)
        except InvalidParameter as e:
            raise click.BadParameter(str(e))

        result = mindist_ab(a, b)
        if math.isnan(result.distance):
            raise click.ClickException("words are not comparable (different lengths)")
        click.echo(f"distance {result.distance:.6f}")
        click.echo(f"above {result.above:.6f}")
        click.echo(f"below {result.below:.6f}")
