from __future__ import annotations

import json
from pathlib import Path

import anyio
from cyclopts import App

from ex_grader.registry import ExerciseRegistry, create_registry
from ex_grader.scorer import ScoringMetadata
from ex_grader.session import GradedAttempt, GradingSession

app = App(name="ex-grader", help="Grade exercise answers from the command line.")


def describe_types(registry: ExerciseRegistry) -> list[str]:
    """One tab-separated line per exercise type: id, name and aliases."""
    return [
        f"{d.id}\t{d.name}\t{', '.join(d.aliases)}" for d in registry.get_all_types()
    ]


def grade_payload(
    registry: ExerciseRegistry,
    type_id: str,
    question: object,
    answer: object,
    metadata: ScoringMetadata,
) -> GradedAttempt:
    session = GradingSession(registry=registry, exercise_type=type_id)
    return session.grade(answer, question, metadata)


def _loads(text: str, source: str) -> object:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SystemExit(f"Invalid JSON in {source}: {e}") from e


@app.command
def types() -> None:
    """List the built-in exercise types and their aliases."""
    for line in describe_types(create_registry()):
        print(line)


@app.command
def resolve(type_id: str) -> None:
    """Print the canonical id an exercise type identifier resolves to."""
    descriptor = create_registry().get(type_id)
    if descriptor is None:
        raise SystemExit(f"Unknown exercise type '{type_id}'.")
    print(descriptor.id)


@app.command
async def grade(
    type_id: str,
    question: Path,
    answer: str,
    *,
    difficulty: str | None = None,
    hints_used: float = 0,
    time_to_answer: float | None = None,
) -> None:
    """
    Grade one answer and print the result as JSON.

    Parameters
    ----------
    type_id
        Exercise type identifier, e.g. "multiple-choice" or "cloze".
    question
        Path to a JSON file holding the question.
    answer
        The learner's answer as a JSON literal, e.g. '["a", "c"]'.
    difficulty
        Difficulty tier (beginner, easy, medium, hard, expert, ...).
    hints_used
        Number of hints the learner consumed.
    time_to_answer
        Milliseconds the learner took to answer.
    """
    path = anyio.Path(question)
    if not await path.exists():
        raise SystemExit(f"Question file '{question}' does not exist.")

    payload = _loads(await path.read_text(encoding="utf-8"), str(question))
    attempt = grade_payload(
        create_registry(),
        type_id,
        payload,
        _loads(answer, "answer"),
        ScoringMetadata(
            difficulty=difficulty,
            hints_used=hints_used,
            time_to_answer=time_to_answer,
        ),
    )
    print(attempt.model_dump_json(by_alias=True, indent=2))
