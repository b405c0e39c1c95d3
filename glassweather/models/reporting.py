"""Per-pass reporting models."""

from dataclasses import dataclass, field


@dataclass
class CycleSummary:
    pass_number: int
    current_ok: bool = False
    forecast_ok: bool = False
    rendered: bool = False
    forecast_days: int = 0
    duration_seconds: float = 0.0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors
