#!/usr/bin/env python3
"""
Administer featured articles and inspect flags.

Usage:
    python admin.py init-db                                         # Create tables
    python admin.py featured PLoSONE                                # List overrides
    python admin.py feature PLoSONE "Ecology" 10.1371/x --auth ID   # Set override
    python admin.py unfeature PLoSONE "Ecology" --auth ID           # Remove override
    python admin.py flags 42 7                                      # Count flags
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from app.errors import ApplicationError
from app.repositories.db import connect
from settings import DB_PATH
from settings.logging import setup_logging

logger = setup_logging(to_file=True)


def _pop_option(args: list[str], name: str) -> str | None:
    """Remove '--name value' from args and return value."""
    if name not in args:
        return None
    i = args.index(name)
    if i + 1 >= len(args):
        print(f"Missing value for {name}")
        sys.exit(1)
    value = args[i + 1]
    del args[i : i + 2]
    return value


def list_featured(journal: str) -> None:
    overrides = container.featured.get_featured_articles(journal)
    if not overrides:
        print(f"\nNo featured article overrides for {journal}.\n")
        return

    print(f"\nFeatured article overrides for {journal}")
    print("=" * 60)
    for category, doi in overrides.items():
        print(f"  {category:<35} {doi}")
    print("=" * 60 + "\n")


def main():
    args = sys.argv[1:]
    auth_id = _pop_option(args, "--auth")

    if not args:
        print(__doc__)
        sys.exit(1)

    command, rest = args[0], args[1:]

    if command == "init-db":
        connect(DB_PATH).close()
        logger.info("Database ready: {}", DB_PATH)
        return

    container.init()
    try:
        if command == "featured" and len(rest) == 1:
            list_featured(rest[0])
        elif command == "feature" and len(rest) == 3:
            container.featured.create_featured_article(rest[0], rest[1], rest[2], auth_id)
            print(f"✅ {rest[2]} featured in {rest[0]}/{rest[1]}")
        elif command == "unfeature" and len(rest) == 2:
            container.featured.delete_featured_article(rest[0], rest[1], auth_id)
            print(f"✅ Override removed for {rest[0]}/{rest[1]}")
        elif command == "flags" and len(rest) == 2 and all(r.isdigit() for r in rest):
            count = container.flags.count_flags(int(rest[0]), int(rest[1]))
            print(f"Article {rest[0]} category {rest[1]}: {count} flag(s)")
        else:
            print(__doc__)
            sys.exit(1)
    except ApplicationError as e:
        print(f"❌ {e.message}")
        sys.exit(1)
    finally:
        container.close()


if __name__ == "__main__":
    main()
