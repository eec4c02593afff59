"""
Review export.

Flattens reviews into a table and writes it as CSV.
"""

import logging
import os
from typing import List

import pandas as pd

from whiskeyclub.models.review import Review, format_timestamp

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    "id",
    "spiritId",
    "spiritName",
    "authorId",
    "authorName",
    "rating",
    "notes",
    "created",
]


def reviews_to_frame(reviews: List[Review]) -> pd.DataFrame:
    """
    Build one row per review, sorted by spirit then review id.

    Args:
        reviews: Reviews to flatten

    Returns:
        DataFrame with EXPORT_COLUMNS (empty if there are no reviews)
    """
    rows = [
        {
            "id": review.id,
            "spiritId": review.spirit_id,
            "spiritName": review.spirit.name,
            "authorId": review.author_id,
            "authorName": review.author_name,
            "rating": review.rating,
            "notes": review.notes,
            "created": format_timestamp(review.created),
        }
        for review in reviews
    ]

    if not rows:
        return pd.DataFrame(columns=EXPORT_COLUMNS)

    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    return df.sort_values(["spiritId", "id"]).reset_index(drop=True)


def export_reviews(reviews: List[Review], output_path: str) -> str:
    """
    Write reviews to a CSV file.

    Returns:
        Path to the written file
    """
    df = reviews_to_frame(reviews)

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    df.to_csv(output_path, index=False)
    logger.info(f"Exported {len(df)} reviews to {output_path}")

    return output_path
