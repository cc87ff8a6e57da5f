"""
Batch scoring over a pandas DataFrame: one row is one candidate document and
columns are its fields.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Optional, Sequence

import pandas as pd

from .errors import EmptySpecSet
from .scorer import FieldScorer
from .script import MISSING_FIELD
from .spec import FieldMatchSpec

logger = logging.getLogger(__name__)


def _rows(frame: pd.DataFrame) -> Iterator[Mapping[str, Any]]:
    # Row by row, each cell keeps its column dtype (iterrows upcasts ints to float)
    return iter(frame.to_dict("records"))


def _row_accessor(row: Mapping[str, Any]):
    def field_value(name: str) -> Any:
        value = row.get(name)
        if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
            return MISSING_FIELD
        return value
    return field_value


def score_frame(
    frame: pd.DataFrame,
    specs: Sequence[FieldMatchSpec],
    scorer: Optional[FieldScorer] = None,
) -> pd.Series:
    """Fused score of every row, indexed like `frame`."""
    if not specs:
        raise EmptySpecSet()
    scorer = scorer or FieldScorer()

    scores = [scorer.evaluate(specs, _row_accessor(row)) for row in _rows(frame)]
    logger.info("Scored %d rows on %d fields", len(scores), len(specs))
    return pd.Series(scores, index=frame.index, name="score", dtype="float64")


def explain_frame(
    frame: pd.DataFrame,
    specs: Sequence[FieldMatchSpec],
    scorer: Optional[FieldScorer] = None,
) -> pd.DataFrame:
    """Per-field clamped scores (``score_<field>`` columns) and the fused ``score``.

    A field named by several specs gets one column per spec, suffixed with its
    position.
    """
    if not specs:
        raise EmptySpecSet()
    scorer = scorer or FieldScorer()

    names = [f"score_{spec.field_name}" for spec in specs]
    columns = [
        name if names.count(name) == 1 else f"{name}_{i}" for i, name in enumerate(names)
    ]

    records = []
    for row in _rows(frame):
        breakdown = scorer.explain(specs, _row_accessor(row))
        record = {column: field.score for column, field in zip(columns, breakdown)}
        record["score"] = scorer.fuse(field.score for field in breakdown)
        records.append(record)

    logger.info("Explained %d rows on %d fields", len(records), len(specs))
    return pd.DataFrame(records, index=frame.index, columns=columns + ["score"], dtype="float64")


def attach_scores(frame: pd.DataFrame, scores: pd.DataFrame) -> pd.DataFrame:
    """Append score columns to `frame`; fused score stays the last column.

    Score columns whose name is already taken in `frame` get a ``_fused``
    suffix.
    """
    renamed = scores.rename(columns=lambda c: f"{c}_fused" if c in frame.columns else c)
    return frame.join(renamed)
