"""
Review Registry - writes and reads reviews across the partitioned containers.

The same review document is stored in Reviews (by reviewId), Spirits
(by spiritId) and Users (by userId) so each lookup is a single-partition read.
"""

import logging
from typing import List, Optional

from whiskeyclub.models.document_type import DocumentType
from whiskeyclub.models.review import Review
from whiskeyclub.utils.storage import DocumentContainer
import config.settings as settings

logger = logging.getLogger(__name__)


class ReviewRegistry:
    """
    Stores reviews in every container their routing fields address.
    """

    def __init__(self, data_root: str):
        """
        Initialize registry and open its containers.

        Args:
            data_root: Directory holding the container files
        """
        self.data_root = data_root
        self.containers = {
            name: DocumentContainer(data_root, name, partition_key)
            for name, partition_key in settings.CONTAINER_PARTITION_KEYS.items()
        }
        self.reviews = self.containers[settings.REVIEWS_CONTAINER]
        self.spirits = self.containers[settings.SPIRITS_CONTAINER]
        self.users = self.containers[settings.USERS_CONTAINER]

    def add_review(self, review: Review) -> None:
        """
        Add or replace a review in all containers.

        Nothing is written unless every container accepts the document.

        Args:
            review: Review to store

        Raises:
            MissingRequiredValueError: If a partition key value is missing
        """
        document = review.to_dict()
        for container in self.containers.values():
            container.validate(document)

        for container in self.containers.values():
            container.upsert(document)

        logger.info(
            f"Stored review {review.id} (spirit={review.spirit_id!r}, user={review.user_id!r})"
        )

    def get_review(self, review_id: str) -> Optional[Review]:
        """Retrieve review by ID. Returns None if not found."""
        document = self.reviews.read(review_id, review_id)
        if document is None or not _is_review(document):
            return None
        return Review.from_dict(document)

    def reviews_for_spirit(self, spirit_id: str) -> List[Review]:
        """All reviews of one spirit."""
        return _to_reviews(self.spirits.query(spirit_id))

    def reviews_by_user(self, user_id: str) -> List[Review]:
        """All reviews written by one user."""
        return _to_reviews(self.users.query(user_id))

    def all_reviews(self) -> List[Review]:
        return _to_reviews(self.reviews.all())

    def save(self) -> None:
        """Persist every container."""
        for container in self.containers.values():
            container.save()


def _is_review(document: dict) -> bool:
    return document.get("type", DocumentType.Review.name) == DocumentType.Review.name


def _to_reviews(documents: List[dict]) -> List[Review]:
    # Spirit and user documents can share a container with reviews
    return [Review.from_dict(document) for document in documents if _is_review(document)]
