#!/usr/bin/env python3
"""
check_lesson_api.py - Fetch a lesson and print its review collections.

Runs the same content pipeline as the app (remote first, built-in content
on failure) and shows what each review screen would page through.

Usage:
  python scripts/check_lesson_api.py --lesson 3
  python scripts/check_lesson_api.py --lesson lesson_3 --kind grammar
  python scripts/check_lesson_api.py --lesson 3 --base-url https://api.example.com
"""

import argparse
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from hanyulearn.config import load_settings
from hanyulearn.content import (
    FallbackContentSource,
    HanyuApiClient,
    RemoteContentSource,
    ReviewKind,
    TokenStore,
    normalize_lesson_id,
)
from hanyulearn.review import ReviewCursor

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_collection(kind: ReviewKind, source: FallbackContentSource, lesson_id: int):
    content = source.fetch(lesson_id, kind)
    cursor = ReviewCursor(content.collection)

    origin = "built-in" if content.is_fallback else "remote"
    print(f"\n== {kind.value} ({origin}) – HSK {content.info.hsk_level}: {content.info.title}")
    print(f"   {len(content.collection)} words, {cursor.total_count} items")
    for outer in content.collection:
        print(f"   [{outer.id}] {outer.word} ({outer.pinyin}) – {outer.meaning}")
        if kind == ReviewKind.GRAMMAR:
            for inner in outer.examples:
                print(f"       [{inner.id}] {inner.text} | {inner.pinyin} | {inner.translation}")


def main():
    parser = argparse.ArgumentParser(
        description="Fetch a lesson and print the vocabulary/grammar review collections",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--lesson",
        default=None,
        help="Lesson id or lesson_<n> reference (default: HANYU_DEFAULT_LESSON_ID)"
    )
    parser.add_argument(
        "--kind",
        choices=[k.value for k in ReviewKind] + ["all"],
        default="all",
        help="Which collection to print"
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Backend base URL (default: API_BASE_URL)"
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=PROJECT_ROOT / ".env",
        help="Path to .env file"
    )

    args = parser.parse_args()

    settings = load_settings(args.env_file)
    lesson_id = normalize_lesson_id(args.lesson) if args.lesson else settings.default_lesson_id
    base_url = args.base_url or settings.api_base_url

    logger.info(f"Fetching lesson {lesson_id} from {base_url}")
    client = HanyuApiClient(
        base_url=base_url,
        token_store=TokenStore(token=settings.access_token),
        timeout=settings.request_timeout,
    )
    source = FallbackContentSource(RemoteContentSource(client))

    kinds = list(ReviewKind) if args.kind == "all" else [ReviewKind(args.kind)]
    for kind in kinds:
        print_collection(kind, source, lesson_id)


if __name__ == "__main__":
    main()
