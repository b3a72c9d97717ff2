"""SAX encoding commands."""

import click
import numpy as np
from pathlib import Path
from typing import Optional

from ...core.encoder import to_sax
from ...core.window import Window
from ...api_windows import sax_windows
from ...exceptions import InvalidParameter


def _load(path: Path, column: int) -> np.ndarray:
    try:
        data = np.loadtxt(path, ndmin=2, dtype=np.float64)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="INPUT_FILE") from e
    if column >= data.shape[1]:
        raise click.BadParameter(f"column {column} not in input with {data.shape[1]} columns")
    return data[:, column]


def register_encode_commands(cli: click.Group) -> None:
    """Register encoding commands."""
    @cli.command("encode", help="Encode a series (or each sliding window of it) as SAX strings")
    @click.argument("input_file", type=click.Path(exists=True, path_type=Path))
    @click.option("-w", "--symbols", "w", type=int, required=True, help="Symbols per word")
    @click.option("-c", "--cardinality", "c", type=int, default=4, show_default=True,
                  help="Alphabet size (2-16)")
    @click.option("--window", type=int, default=None,
                  help="Samples per word; encode the whole series if omitted")
    @click.option("--step", type=int, default=1, show_default=True, help="Window step")
    @click.option("--column", type=int, default=0, show_default=True, help="Input column")
    def encode(input_file: Path, w: int, c: int, window: Optional[int], step: int, column: int):
        """Encode INPUT_FILE, one SAX string per line.

        Examples:

        \b
            symtseries encode series.txt -w 8 -c 4
            symtseries encode series.txt -w 4 -c 8 --window 64 --step 16
        """
        x = _load(input_file, column)
        try:
            if window is None:
                words = [to_sax(x, w, c)]
            else:
                words = sax_windows(x, window=window, w=w, c=c, step=step)
        except InvalidParameter as e:
            raise click.BadParameter(str(e))
        for word in words:
            click.echo(word.to_string())

    @cli.command("stream", help="Feed a series through a sliding window and print each word")
    @click.argument("input_file", type=click.Path(exists=True, path_type=Path))
    @click.option("-n", "--window", "n", type=int, required=True, help="Samples per word")
    @click.option("-w", "--symbols", "w", type=int, required=True, help="Symbols per word")
    @click.option("-c", "--cardinality", "c", type=int, default=4, show_default=True,
                  help="Alphabet size (2-16)")
    @click.option("--column", type=int, default=0, show_default=True, help="Input column")
    def stream(input_file: Path, n: int, w: int, c: int, column: int):
        """Print "<index> <word>" for every sample once the window is full."""
        x = _load(input_file, column)
        try:
            window = Window(n, w, c)
        except InvalidParameter as e:
            raise click.BadParameter(str(e))
        with window:
            for i, value in enumerate(x):
                word = window.append_value(value)
                if word is not None:
                    click.echo(f"{i} {word}")
