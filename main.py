"""
WhiskeyClub - Spirit reviews

CLI entry point for adding, reading and exporting reviews.
"""

import argparse
import logging
import os
import sys
import uuid

from whiskeyclub.models.errors import InvalidArgumentError
from whiskeyclub.models.review import Review
from whiskeyclub.models.spirit import SpiritInfo
from whiskeyclub.registry.review_registry import ReviewRegistry
from whiskeyclub.utils.export import export_reviews
import config.settings as settings


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the entire application."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=settings.LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(settings.LOG_FILE)
        ]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="WhiskeyClub - Spirit reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Add a review
  python main.py add --spirit-id sp-9 --spirit-name "Lagavulin 16" \\
                     --author-id user-42 --author-name Alice

  # Reviews of one spirit
  python main.py list --spirit sp-9

  # Export every review
  python main.py export --output output/reviews.csv
        """
    )

    parser.add_argument(
        "--data-root",
        default=str(settings.DATA_ROOT),
        help=f"Data directory (default: {settings.DATA_ROOT})"
    )

    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {settings.LOG_LEVEL})"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    add = subparsers.add_parser("add", help="Add a review")
    add.add_argument("--id", help="Review ID (default: new UUID)")
    add.add_argument("--spirit-id", required=True)
    add.add_argument("--spirit-name", default="")
    add.add_argument("--author-id", required=True)
    add.add_argument("--author-name", default="")

    show = subparsers.add_parser("show", help="Show one review")
    show.add_argument("review_id")

    list_parser = subparsers.add_parser("list", help="List reviews")
    scope = list_parser.add_mutually_exclusive_group()
    scope.add_argument("--spirit", help="Only reviews of this spirit ID")
    scope.add_argument("--user", help="Only reviews by this user ID")

    export = subparsers.add_parser("export", help="Export reviews to CSV")
    export.add_argument(
        "--output",
        default=os.path.join(str(settings.OUTPUT_ROOT), settings.EXPORT_FILENAME),
        help="CSV output path"
    )

    return parser


def format_review(review: Review) -> str:
    return (
        f"{review.id}  {review.spirit.name or review.spirit_id}  "
        f"by {review.author_name or review.user_id}  rating={review.rating}"
    )


def run(args: argparse.Namespace) -> int:
    """Execute one subcommand. Returns the process exit code."""
    registry = ReviewRegistry(args.data_root)

    if args.command == "add":
        review = Review(
            id=args.id if args.id is not None else str(uuid.uuid4()),
            spirit=SpiritInfo(id=args.spirit_id, name=args.spirit_name),
            author_id=args.author_id,
            author_name=args.author_name
        )
        registry.add_review(review)
        registry.save()
        print(f"Added review {review.id}")
        return 0

    if args.command == "show":
        review = registry.get_review(args.review_id)
        if review is None:
            print(f"Review not found: {args.review_id}")
            return 1
        print(format_review(review))
        return 0

    if args.command == "list":
        if args.spirit:
            reviews = registry.reviews_for_spirit(args.spirit)
        elif args.user:
            reviews = registry.reviews_by_user(args.user)
        else:
            reviews = registry.all_reviews()

        for review in reviews:
            print(format_review(review))
        print(f"{len(reviews)} review(s)")
        return 0

    if args.command == "export":
        output_path = export_reviews(registry.all_reviews(), args.output)
        print(f"Exported reviews to {output_path}")
        return 0

    return 1


def main():
    """Main CLI entry point."""
    args = build_parser().parse_args()

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        sys.exit(run(args))

    except InvalidArgumentError as e:
        logger.error(f"Invalid {e.param_name}: {e}")
        print(f"❌ {e}")
        sys.exit(1)

    except Exception as e:
        logger.error(f"Command {args.command} failed: {e}", exc_info=True)
        print(f"\n❌ Command failed: {e}")
        print(f"Check {settings.LOG_FILE} for details")
        sys.exit(1)


if __name__ == "__main__":
    main()
