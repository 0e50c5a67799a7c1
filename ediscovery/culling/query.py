from dataclasses import dataclass


@dataclass(frozen=True)
class CullingQuery:
    """Newline-delimited search terms or phrases, ORed together."""

    terms: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str | None) -> "CullingQuery":
        if not text:
            return cls()
        return cls(terms=tuple(line.strip() for line in text.splitlines() if line.strip()))

    @property
    def is_empty(self) -> bool:
        return not self.terms

    def to_query_string(self) -> str:
        """Join the terms into one boolean query."""
        return " OR ".join(self.terms)
