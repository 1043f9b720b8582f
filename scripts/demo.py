#!/usr/bin/env python3
"""
Demo script for gone-links.

This script walks through classification, the miss log and reconciliation
using the in-memory store, so no Redis is needed.
"""

from gone_links import GoneEngine, InMemoryEntryRepository, PublishedContent, Settings


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_classification(engine: GoneEngine) -> None:
    """Demonstrate Gone matching with specific and wildcard patterns."""
    print_section("Classification")

    patterns = [
        "http://example.com/old-post/",
        "http://example.com/*/music/",
        "http://example.com/archive/2009/*",
    ]

    print("\nAdding Gone patterns...")
    for pattern in patterns:
        result = engine.add_gone(pattern)
        print(f"  {result.value:>15}: {pattern}")

    requests = [
        "http://example.com/old-post/",
        "HTTP://EXAMPLE.COM/Old-Post/",
        "http://example.com/rock/music/",
        "http://example.com/archive/2009/07/hello/",
        "http://example.com/new-post/",
    ]

    print("\nClassifying requests that found no content:")
    for url in requests:
        result = engine.classify(url)
        if result.is_gone:
            print(f"  410  {url}  (matched {result.witness})")
        else:
            print(f"  404  {url}")


def demo_miss_log(engine: GoneEngine) -> None:
    """Demonstrate the bounded miss log and promotion."""
    print_section("Miss Log")

    for i in range(8):
        engine.classify(f"http://example.com/missing-{i}/")

    print(f"\nLimit: {engine.max_miss_entries}")
    for entry in engine.list_miss():
        print(f"  #{entry.sequence:<3} {entry.key}")

    print("\nPromoting the newest miss...")
    newest = engine.list_miss()[0].key
    engine.promote(newest)
    print(f"  {newest} -> {engine.classify(newest).outcome.value}")

    print("\nLowering the limit to 2...")
    trimmed = engine.set_max_miss_entries(2)
    print(f"  trimmed {trimmed}, kept {[entry.key for entry in engine.list_miss()]}")


def demo_reconciliation(engine: GoneEngine) -> None:
    """Demonstrate clearing Gone entries when content is republished."""
    print_section("Reconciliation")

    engine.add_gone("http://example.com/old-post/*")
    removed = engine.on_content_saved(PublishedContent(permalink="http://example.com/old-post/"))
    print(f"\nRepublished http://example.com/old-post/ -> removed {removed} Gone entries")
    print(f"  now: {engine.classify('http://example.com/old-post/').outcome.value}")


def main() -> None:
    """Run all demos."""
    engine = GoneEngine.create(
        store=InMemoryEntryRepository(),
        settings=Settings(home_url="http://example.com/", max_miss_entries=5),
    )

    demo_classification(engine)
    demo_miss_log(engine)
    demo_reconciliation(engine)

    print_section("Stats")
    for name, value in engine.get_stats().items():
        print(f"  {name}: {value}")


if __name__ == "__main__":
    main()
