from dataclasses import dataclass, field


@dataclass(slots=True)
class ExtractionResult:
    """Structured output from an extraction engine."""

    text: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)
