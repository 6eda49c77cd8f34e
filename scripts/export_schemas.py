"""Export JSON schemas for ItineraryDocument and DayEntry."""

import json
from pathlib import Path

from tripcal.models import DayEntry, ItineraryDocument


def main() -> None:
    """Export schemas to docs/schemas/."""
    schemas_dir = Path("docs/schemas")
    schemas_dir.mkdir(parents=True, exist_ok=True)

    # Export ItineraryDocument schema (input)
    document_schema = ItineraryDocument.model_json_schema(by_alias=True)
    document_path = schemas_dir / "ItineraryDocument.schema.json"
    with open(document_path, "w") as f:
        json.dump(document_schema, f, indent=2)
    print(f"Exported ItineraryDocument schema to {document_path}")

    # Export DayEntry schema (output)
    day_schema = DayEntry.model_json_schema(by_alias=True, mode="serialization")
    day_path = schemas_dir / "DayEntry.schema.json"
    with open(day_path, "w") as f:
        json.dump(day_schema, f, indent=2)
    print(f"Exported DayEntry schema to {day_path}")


if __name__ == "__main__":
    main()
