"""Pydantic models for the structured results returned by the remote model.

Field names are snake_case; the camelCase names the model is asked to emit are
kept as aliases so payloads validate as-is and ``model_dump(by_alias=True)``
reproduces the wire shape.
"""

from pydantic import BaseModel, ConfigDict, Field


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GeneratedCodeResult(_WireModel):
    """Output of the generate and convert modes."""

    code: str
    explanation: str


class QualityMetrics(_WireModel):
    """Five quality scores, each on a 0-10 scale."""

    readability: float = Field(ge=0, le=10)
    maintainability: float = Field(ge=0, le=10)
    security: float = Field(ge=0, le=10)
    performance: float = Field(ge=0, le=10)
    structure: float = Field(ge=0, le=10)

    def as_rows(self) -> list[tuple[str, float]]:
        """(label, score) pairs in display order."""
        return [
            ("Readability", self.readability),
            ("Maintainability", self.maintainability),
            ("Security", self.security),
            ("Performance", self.performance),
            ("Structure", self.structure),
        ]


class CodeAnalysisResult(_WireModel):
    """Output of the analyze mode."""

    explanation: str
    time_complexity: str = Field(alias="timeComplexity")
    space_complexity: str = Field(alias="spaceComplexity")
    security_issues: list[str] = Field(alias="securityIssues")
    improvements: list[str]
    quality_score: QualityMetrics = Field(alias="qualityScore")


class DiffResult(_WireModel):
    """Output of the diff mode."""

    summary: str
    changes: list[str]
    risk_assessment: str = Field(alias="riskAssessment")
