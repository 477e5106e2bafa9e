"""Book recommendations by project type."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from types import MappingProxyType

RECOMMENDATIONS = MappingProxyType(
    {
        "AI": "Artificial Intelligence by Russell & Norvig",
        "DBMS": "Database System Concepts by Silberschatz",
        "Web": "HTML & CSS by Jon Duckett",
        "ML": "Hands-On Machine Learning with Scikit-Learn by Aurélien Géron",
    }
)


def recommend_book(project_type: str) -> str | None:
    """The recommended book for ``project_type``, or None if there is none."""
    return RECOMMENDATIONS.get(project_type)


_MENU = (
    "\n--- Library Book Recommendation Expert System ---\n"
    "1. Get Book Recommendation\n2. Exit\nEnter choice: "
)


def _prompt(lines: Iterator[str], text: str) -> str:
    print(text, end="")
    line = next(lines, None)
    if line is None:
        raise EOFError
    return line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Run the recommendation menu on standard input."""
    parser = argparse.ArgumentParser(description="Library book recommendation system.")
    parser.parse_args(argv)
    lines = iter(sys.stdin)
    try:
        while True:
            choice = _prompt(lines, _MENU).strip()
            if choice == "1":
                project = _prompt(lines, "Enter your project type (AI/DBMS/Web/ML): ")
                book = recommend_book(project)
                if book is None:
                    print("Sorry, no recommendation available for this project type.")
                else:
                    print(f"Recommended Book: {book}")
            elif choice == "2":
                return 0
            else:
                print("Invalid choice.")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())