"""Rule-based employee appraisal: position-specific questions and advice."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass

MAX_EMPLOYEES = 100
MIN_RATING = 1
MAX_RATING = 10

_QUESTIONS: dict[str, tuple[str, ...]] = {
    "Manager": (
        "Leadership",
        "Strategy",
        "Motivation",
        "Decision Making",
        "Delegation",
    ),
    "Developer": (
        "Problem Solving",
        "Coding",
        "Technical Knowledge",
        "Code Quality",
        "Collaboration",
    ),
    "Customer Support": (
        "Communication",
        "Resolution",
        "Patience",
        "Product Knowledge",
        "Satisfaction",
    ),
}


def questions_for(position: str) -> tuple[str, ...]:
    """The appraisal questions for ``position``; empty for an unknown position."""
    return _QUESTIONS.get(position, ())


def advice_for(rating: int) -> str:
    """Advice text for a single rating."""
    if rating >= 8:
        return "Excellent. Keep it up!"
    if rating >= 6:
        return "Good. You can improve further."
    if rating >= 4:
        return "Needs improvement."
    return "Poor. Needs serious attention."


def validate_rating(rating: int) -> int:
    """Return ``rating`` if it lies in 1..10, else raise ValueError."""
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(
            f"rating {rating} is outside {MIN_RATING}..{MAX_RATING}"
        )
    return rating


@dataclass(frozen=True)
class Employee:
    """An appraised employee with one rating per question of their position."""

    name: str
    department: str
    position: str
    ratings: tuple[int, ...]

    def __post_init__(self) -> None:
        questions = questions_for(self.position)
        if not questions:
            raise ValueError(f"invalid position: {self.position!r}")
        ratings = tuple(validate_rating(r) for r in self.ratings)
        if len(ratings) != len(questions):
            raise ValueError(
                f"expected {len(questions)} ratings, got {len(ratings)}"
            )
        object.__setattr__(self, "ratings", ratings)

    @property
    def questions(self) -> tuple[str, ...]:
        return questions_for(self.position)

    @property
    def scores(self) -> list[tuple[str, int]]:
        """Pairs of ``(question, rating)`` in question order."""
        return list(zip(self.questions, self.ratings))


def format_employee(employee: Employee) -> str:
    """A header line followed by one ``question: r/10  advice`` line per rating."""
    lines = [f"{employee.name} | {employee.department} | {employee.position}"]
    lines.extend(
        f"{question}: {rating}/10  {advice_for(rating)}"
        for question, rating in employee.scores
    )
    return "\n".join(lines)


class EmployeeRegistry:
    """A bounded collection of employees kept in the order they were added."""

    def __init__(self, capacity: int = MAX_EMPLOYEES) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._employees: list[Employee] = []

    def add(self, employee: Employee) -> None:
        """Store ``employee``; raise OverflowError once the registry is full."""
        if len(self._employees) >= self.capacity:
            raise OverflowError("Employee limit reached.")
        self._employees.append(employee)

    def find(self, name: str) -> Employee | None:
        """The first employee called ``name``, or None."""
        return next((e for e in self._employees if e.name == name), None)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def __len__(self) -> int:
        return len(self._employees)


_MENU = (
    "\n1. Add Employee\n2. View All Employees\n3. View Specific Employee\n"
    "4. Exit\nEnter choice: "
)


def _prompt(lines: Iterator[str], text: str) -> str:
    print(text, end="")
    line = next(lines, None)
    if line is None:
        raise EOFError
    return line.rstrip("\r\n")


def _ask_rating(lines: Iterator[str], question: str) -> int:
    while True:
        reply = _prompt(lines, f"Rate {question} (1-10): ")
        try:
            return validate_rating(int(reply))
        except ValueError:
            print("Invalid rating. Please enter a number between 1 and 10.")


def _add_employee(registry: EmployeeRegistry, lines: Iterator[str]) -> None:
    if len(registry) >= registry.capacity:
        print("Employee limit reached.")
        return
    name = _prompt(lines, "Enter name: ")
    department = _prompt(lines, "Enter department (IT/Finance/Marketing): ")
    position = _prompt(
        lines, "Enter position (Manager/Developer/Customer Support): "
    )
    questions = questions_for(position)
    if not questions:
        print("Invalid position entered.")
        return
    ratings = tuple(_ask_rating(lines, question) for question in questions)
    registry.add(Employee(name, department, position, ratings))
    print("Employee added successfully.")


def _view_all(registry: EmployeeRegistry) -> None:
    if not len(registry):
        print("No employees to show.")
        return
    for employee in registry:
        print("\n" + format_employee(employee))
        print("-------------------------")


def _view_specific(registry: EmployeeRegistry, lines: Iterator[str]) -> None:
    name = _prompt(lines, "Enter employee name to search: ")
    employee = registry.find(name)
    if employee is None:
        print("Employee not found.")
    else:
        print("\n" + format_employee(employee))


def main(argv: list[str] | None = None) -> int:
    """Run the appraisal menu on standard input."""
    parser = argparse.ArgumentParser(description="Employee appraisal expert system.")
    parser.parse_args(argv)
    registry = EmployeeRegistry()
    lines = iter(sys.stdin)
    try:
        while True:
            choice = _prompt(lines, _MENU).strip()
            if choice == "1":
                _add_employee(registry, lines)
            elif choice == "2":
                _view_all(registry)
            elif choice == "3":
                _view_specific(registry, lines)
            elif choice == "4":
                return 0
            else:
                print("Invalid choice. Try again.")
    except EOFError:
        print()
        return 0


if __name__ == "__main__":
    sys.exit(main())