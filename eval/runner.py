"""Eval runner - loads itinerary scenarios and checks calendar predicates."""

import sys
from pathlib import Path
from typing import Any

import yaml

from tripcal.budget.rollup import roll_up_budget
from tripcal.models import ActivityItem, DayEntry, ItineraryDocument
from tripcal.projection.projector import project

SCENARIOS_PATH = Path(__file__).resolve().parent / "scenarios.yaml"


def load_scenarios(path: Path = SCENARIOS_PATH) -> dict[str, Any]:
    """Load scenarios from YAML."""
    with open(path) as f:
        result: dict[str, Any] = yaml.safe_load(f)
        return result


def day_index(days: list[DayEntry]) -> dict[str, DayEntry]:
    """Days keyed by date key."""
    return {day.date_key: day for day in days}


def evaluate_predicates(env: dict[str, Any], predicates: list[dict[str, str]]) -> tuple[int, int]:
    """Evaluate predicates; return (passed, total)."""
    passed = 0
    total = len(predicates)

    for pred_data in predicates:
        predicate = pred_data["predicate"]
        description = pred_data.get("description", predicate)
        try:
            result = eval(predicate, {"__builtins__": {}}, env)
            if result:
                passed += 1
                print(f"  ✓ PASS: {description}")
            else:
                print(f"  ✗ FAIL: {description}")
        except Exception as e:
            print(f"  ✗ ERROR: {description} - {e}")

    return passed, total


def run_scenario(scenario: dict[str, Any]) -> tuple[int, int]:
    """Project one scenario and evaluate its predicates."""
    document = ItineraryDocument.model_validate(scenario["document"])
    days = project(document)
    user_activities = {
        date_key: [ActivityItem.model_validate(a) for a in activities]
        for date_key, activities in (scenario.get("user_activities") or {}).items()
    }
    budget = roll_up_budget(
        days,
        budget=document.budget,
        user_activities=user_activities,
        deleted_activity_ids=scenario.get("deleted_activities") or {},
    )

    env = {
        "days": days,
        "day": day_index(days),
        "budget": budget,
        "len": len,
        "sum": sum,
        "any": any,
        "all": all,
    }
    return evaluate_predicates(env, scenario["must_satisfy"])


def main() -> int:
    """Run eval scenarios."""
    scenarios = load_scenarios()["scenarios"]

    total_passed = 0
    total_predicates = 0

    for scenario in scenarios:
        print(f"\n=== Scenario: {scenario['scenario_id']} ===")
        print(f"Description: {scenario['description']}")

        passed, total = run_scenario(scenario)
        total_passed += passed
        total_predicates += total

        print(f"Result: {passed}/{total} predicates passed")

    print("\n=== Summary ===")
    print(f"Total: {total_passed}/{total_predicates} predicates passed")

    if total_passed < total_predicates:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
