"""
Schema-driven structured output.

Single source of truth for LLM output formats.
"""

import yaml
from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class ResponseSchema:
    name: str
    description: str
    instruction: str
    schema: dict
    required: list[str] = field(default_factory=list)

    def build_prompt(self, text: str) -> str:
        """Fill the instruction template with the caller's text."""
        return self.instruction.format(prompt=text)

    def to_response_format(self) -> dict:
        """Structured-output request block for an OpenAI-compatible API."""
        return {
            "type": "json_schema",
            "json_schema": {
                "name": self.name,
                "description": self.description,
                "strict": True,
                "schema": self.schema,
            },
        }


def load_schema(name: str) -> ResponseSchema:
    """Load a schema by name."""
    schema_dir = Path(__file__).parent
    schema_file = schema_dir / f"{name}.yaml"

    if not schema_file.exists():
        raise FileNotFoundError(f"Schema not found: {name}")

    with open(schema_file) as f:
        data = yaml.safe_load(f)

    schema = data["schema"]
    properties = schema.get("properties", {})
    required = schema.get("required", [])

    # Every property must be required so the service rejects partial replies
    optional = sorted(set(properties) - set(required))
    if optional:
        raise ValueError(f"Schema {name} leaves fields optional: {optional}")

    return ResponseSchema(
        name=data["name"],
        description=data.get("description", ""),
        instruction=data["instruction"],
        schema=schema,
        required=list(required),
    )


# Convenience: the enrichment format
def get_analysis_schema() -> ResponseSchema:
    return load_schema("analysis_result")
