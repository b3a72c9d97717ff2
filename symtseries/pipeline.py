"""
YAML-driven SAX pipeline.

Loads a series from a text file, encodes it either by streaming it through a
:class:`~symtseries.core.window.Window` or by batch-encoding sliding windows,
and writes one record per word as JSON lines or CSV.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import numpy as np

from .api_windows import sax_windows, window_starts
from .config import InputConfig, OutputConfig, PipelineConfig
from .core.window import Window
from .core.word import Word

logger = logging.getLogger(__name__)


def load_series(config: InputConfig) -> np.ndarray:
    """Load one column of numbers from a delimited text file."""
    path = Path(config.path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    logger.info(f"Loading series from {path}...")
    data = np.loadtxt(path, delimiter=config.delimiter, skiprows=config.skip_header,
                      ndmin=2, dtype=np.float64)
    if config.column >= data.shape[1]:
        raise ValueError(f"column {config.column} not in input with {data.shape[1]} columns")
    series = data[:, config.column]
    logger.info(f"Loaded {len(series)} values")
    return series


def _record(index: int, word: Word, values: np.ndarray, include_values: bool) -> Dict[str, Any]:
    record = {
        'index': index,
        'word': word.to_string(),
        'cardinality': word.cardinality,
        'source_length': word.source_length,
    }
    if include_values:
        record['values'] = values.tolist()
    return record


def encode_series(x: np.ndarray, config: PipelineConfig) -> List[Dict[str, Any]]:
    """
    Encode ``x`` according to ``config``.

    In ``window`` mode every sample from the ``n``-th on yields a record whose
    ``index`` is the position of that sample. In ``batch`` mode windows start
    every ``step`` samples and ``index`` is the window start.
    """
    sax = config.sax
    include_values = config.output.include_values
    records = []

    if config.stream.mode == 'batch':
        starts = window_starts(len(x), width=sax.n, by=config.stream.step)
        words = sax_windows(x, window=sax.n, w=sax.w, c=sax.c, step=config.stream.step)
        for start, word in zip(starts, words):
            records.append(_record(start, word, x[start:start + sax.n], include_values))
        return records

    with Window(sax.n, sax.w, sax.c) as window:
        for i, value in enumerate(x):
            word = window.append_value(value)
            if word is not None and (i + 1 - sax.n) % config.stream.step == 0:
                records.append(_record(i, word, window.values, include_values))
    logger.info(f"Encoded {len(records)} words from {len(x)} samples")
    return records


def _write_jsonl(records: List[Dict[str, Any]], f) -> None:
    for record in records:
        f.write(json.dumps(record) + '\n')


def _write_csv(records: List[Dict[str, Any]], target) -> None:
    """Write records to CSV format."""
    import pandas as pd
    df = pd.DataFrame(records)
    df.to_csv(target, index=False)


def write_records(records: List[Dict[str, Any]], config: OutputConfig) -> None:
    """Write records as JSON lines or CSV to ``config.path`` (stdout if unset)."""
    if config.path:
        Path(config.path).parent.mkdir(parents=True, exist_ok=True)
    if config.format == 'csv':
        _write_csv(records, config.path or sys.stdout)
    elif config.path:
        with open(config.path, 'w') as f:
            _write_jsonl(records, f)
    else:
        _write_jsonl(records, sys.stdout)
    if config.path:
        logger.info(f"Wrote {len(records)} records to {config.path}")


def run_pipeline(config: PipelineConfig) -> List[Dict[str, Any]]:
    """Load, encode and write according to ``config``; returns the records."""
    try:
        x = load_series(config.input)
        records = encode_series(x, config)
    except Exception as e:
        if config.logging.log_errors:
            logger.error(f"{config.input.path}: {e}")
            if config.logging.error_path:
                with open(config.logging.error_path, 'w') as f:
                    json.dump({'path': config.input.path, 'error': str(e)}, f, indent=2)
        raise
    write_records(records, config.output)
    return records
