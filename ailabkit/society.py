"""A log of society maintenance events that answers 'why' questions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """A service outage on some day, with its reason."""

    day: str
    issue_type: str
    reason: str

    def describe(self) -> str:
        return f"On {self.day}, {self.issue_type} issue occurred: {self.reason}"


class EventLog:
    """Events in the order they were recorded."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def add(self, event: Event) -> None:
        self._events.append(event)

    def query_why(self, day: str, issue_type: str) -> str | None:
        """The reason of the first event on ``day`` of ``issue_type``, or None."""
        return next(
            (
                e.reason
                for e in self._events
                if e.day == day and e.issue_type == issue_type
            ),
            None,
        )

    def __iter__(self) -> Iterator[Event]:
        return iter(self._events)

    def __len__(self) -> int:
        return len(self._events)


_MENU = (
    "\n--- Society Maintenance Expert System ---\n"
    "1. Add Event\n2. Display All Events\n3. Query 'Why' an issue occurred\n"
    "4. Exit\nEnter choice: "
)


def _prompt(lines: Iterator[str], text: str) -> str:
    print(text, end="")
    line = next(lines, None)
    if line is None:
        raise EOFError
    return line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Run the maintenance menu on standard input."""
    parser = argparse.ArgumentParser(description="Society maintenance expert system.")
    parser.parse_args(argv)
    log = EventLog()
    lines = iter(sys.stdin)
    try:
        while True:
            choice = _prompt(lines, _MENU).strip()
            if choice == "1":
                day = _prompt(lines, "Enter day (e.g., Monday): ")
                issue = _prompt(lines, "Enter issue type (Water/Electricity): ")
                reason = _prompt(lines, "Enter reason: ")
                log.add(Event(day, issue, reason))
                print("Event added successfully.")
            elif choice == "2":
                if not len(log):
                    print("No events to display.")
                else:
                    print("\n--- All Events ---")
                    for event in log:
                        print(event.describe())
            elif choice == "3":
                day = _prompt(lines, "Enter the day: ")
                issue = _prompt(lines, "Enter issue type (Water/Electricity): ")
                reason = log.query_why(day, issue)
                if reason is None:
                    print("No information found for that query.")
                else:
                    print(f"On {day}, {issue} was not available because: {reason}")
            elif choice == "4":
                return 0
            else:
                print("Invalid choice.")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())