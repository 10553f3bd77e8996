"""JSON schemas the structured modes demand from the model.

Written for strict structured output: every object lists all of its
properties as required and forbids extras.
"""

from typing import Any

_STRING = {"type": "string"}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}


def _object(properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties),
        "additionalProperties": False,
    }


GENERATED_CODE_SCHEMA = _object({
    "code": {"type": "string", "description": "The generated code snippet"},
    "explanation": {"type": "string", "description": "Brief explanation of logic"},
})

CONVERTED_CODE_SCHEMA = _object({
    "code": {"type": "string", "description": "The converted code"},
    "explanation": {"type": "string", "description": "Key changes made during conversion"},
})

QUALITY_METRICS_SCHEMA = _object({
    "readability": {"type": "number"},
    "maintainability": {"type": "number"},
    "security": {"type": "number"},
    "performance": {"type": "number"},
    "structure": {"type": "number"},
})

CODE_ANALYSIS_SCHEMA = _object({
    "explanation": _STRING,
    "timeComplexity": _STRING,
    "spaceComplexity": _STRING,
    "securityIssues": _STRING_LIST,
    "improvements": _STRING_LIST,
    "qualityScore": QUALITY_METRICS_SCHEMA,
})

DIFF_SCHEMA = _object({
    "summary": {"type": "string", "description": "High level summary of changes"},
    "changes": {**_STRING_LIST, "description": "List of specific changes"},
    "riskAssessment": {"type": "string", "description": "Impact on security or performance"},
})
