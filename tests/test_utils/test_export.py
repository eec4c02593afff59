"""
Unit tests for review export.
"""

import os
import tempfile

import pandas as pd
from whiskeyclub.models.review import Review
from whiskeyclub.models.spirit import SpiritInfo
from whiskeyclub.utils.export import EXPORT_COLUMNS, export_reviews, reviews_to_frame


def test_empty_frame_has_columns():
    df = reviews_to_frame([])

    assert list(df.columns) == EXPORT_COLUMNS
    assert df.empty


def test_frame_rows_sorted_by_spirit_then_id():
    reviews = [
        Review("rev-2", SpiritInfo(id="sp-9", name="Lagavulin 16"), "user-7", "Bob"),
        Review("rev-3", SpiritInfo(id="sp-1", name="Redbreast 12"), "user-42", "Alice"),
        Review("rev-1", SpiritInfo(id="sp-9", name="Lagavulin 16"), "user-42", "Alice"),
    ]

    df = reviews_to_frame(reviews)

    assert list(df["id"]) == ["rev-3", "rev-1", "rev-2"]
    assert df.loc[0, "spiritName"] == "Redbreast 12"
    assert df.loc[1, "created"] == "0001-01-01T00:00:00"


def test_export_writes_csv():
    with tempfile.TemporaryDirectory() as tmpdir:
        output_path = os.path.join(tmpdir, "out", "reviews.csv")
        review = Review("rev-1", SpiritInfo(id="sp-9", name="Lagavulin 16"), "user-42", "Alice")

        assert export_reviews([review], output_path) == output_path

        df = pd.read_csv(output_path, dtype=str, keep_default_na=False)
        assert list(df.columns) == EXPORT_COLUMNS
        assert df.loc[0, "authorName"] == "Alice"
