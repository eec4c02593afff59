"""
Unit tests for ReviewRegistry.
"""

import tempfile

import pytest
from whiskeyclub.models.errors import MissingRequiredValueError
from whiskeyclub.models.review import Review
from whiskeyclub.models.spirit import SpiritInfo
from whiskeyclub.registry.review_registry import ReviewRegistry


def make_review(review_id, spirit_id, author_id, author_name="Alice"):
    return Review(review_id, SpiritInfo(id=spirit_id, name=f"Spirit {spirit_id}"), author_id, author_name)


def test_add_review_writes_every_container():
    with tempfile.TemporaryDirectory() as tmpdir:
        registry = ReviewRegistry(tmpdir)
        registry.add_review(make_review("rev-1", "sp-9", "user-42"))

        assert registry.reviews.read("rev-1", "rev-1") is not None
        assert registry.spirits.read("rev-1", "sp-9") is not None
        assert registry.users.read("rev-1", "user-42") is not None


def test_get_review():
    with tempfile.TemporaryDirectory() as tmpdir:
        registry = ReviewRegistry(tmpdir)
        review = make_review("rev-1", "sp-9", "user-42")
        registry.add_review(review)

        assert registry.get_review("rev-1") == review
        assert registry.get_review("rev-404") is None


def test_reviews_for_spirit_and_user():
    with tempfile.TemporaryDirectory() as tmpdir:
        registry = ReviewRegistry(tmpdir)
        registry.add_review(make_review("rev-1", "sp-9", "user-42"))
        registry.add_review(make_review("rev-2", "sp-9", "user-7", "Bob"))
        registry.add_review(make_review("rev-3", "sp-1", "user-42"))

        assert [r.id for r in registry.reviews_for_spirit("sp-9")] == ["rev-1", "rev-2"]
        assert [r.id for r in registry.reviews_by_user("user-42")] == ["rev-1", "rev-3"]
        assert registry.reviews_for_spirit("sp-404") == []
        assert len(registry.all_reviews()) == 3


def test_queries_skip_other_document_types():
    with tempfile.TemporaryDirectory() as tmpdir:
        registry = ReviewRegistry(tmpdir)
        registry.add_review(make_review("rev-1", "sp-9", "user-42"))
        registry.spirits.upsert(
            {"id": "sp-9", "spiritId": "sp-9", "name": "Lagavulin 16", "type": "Spirit"}
        )

        assert [r.id for r in registry.reviews_for_spirit("sp-9")] == ["rev-1"]


def test_save_and_reload():
    """Test registry persistence."""
    with tempfile.TemporaryDirectory() as tmpdir:
        registry1 = ReviewRegistry(tmpdir)
        review = make_review("rev-1", "sp-9", "user-42")
        registry1.add_review(review)
        registry1.save()

        registry2 = ReviewRegistry(tmpdir)

        assert registry2.get_review("rev-1") == review
        assert registry2.reviews_for_spirit("sp-9") == [review]
        assert registry2.reviews_by_user("user-42") == [review]


def test_add_review_writes_nothing_when_a_container_rejects_it():
    with tempfile.TemporaryDirectory() as tmpdir:
        registry = ReviewRegistry(tmpdir)
        # No author id, so there is no Users partition key
        review = Review("rev-1", SpiritInfo(id="sp-9"), None, "Alice")

        with pytest.raises(MissingRequiredValueError, match="userId"):
            registry.add_review(review)

        assert registry.reviews.documents == {}
        assert registry.spirits.documents == {}
        assert registry.users.documents == {}


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
