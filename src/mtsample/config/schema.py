"""Pydantic v2 configuration models for mtsample."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

UINT32_MAX = 0xFFFFFFFF


class GeneratorConfig(BaseModel):
    """How the Mersenne Twister is seeded.

    At most one of ``seed`` and ``init_key`` may be set. With neither, the
    generator uses its default seed (5489).
    """

    model_config = ConfigDict(extra="forbid")

    seed: int | None = Field(
        default=None, ge=0, le=UINT32_MAX, description="Scalar 32-bit seed"
    )
    init_key: list[int] | None = Field(
        default=None,
        min_length=1,
        description="Seed key of 32-bit words for array seeding",
    )

    @model_validator(mode="after")
    def _validate_seed(self) -> GeneratorConfig:
        if self.seed is not None and self.init_key is not None:
            raise ValueError("seed and init_key are mutually exclusive")
        if self.init_key is not None:
            for i, word in enumerate(self.init_key):
                if word < 0 or word > UINT32_MAX:
                    raise ValueError(f"init_key[{i}] must be between 0 and 2**32 - 1, got {word}")
        return self


class UniformConfig(BaseModel):
    """Uniform draws over [low, high)."""

    model_config = ConfigDict(extra="forbid")

    low: float = -89.2
    high: float = 56.7
    n_draws: int = Field(default=10, ge=1, le=10_000_000)

    @model_validator(mode="after")
    def _validate_bounds(self) -> UniformConfig:
        if self.high < self.low:
            raise ValueError(f"high ({self.high}) must not be below low ({self.low})")
        return self


class ClassesConfig(BaseModel):
    """Discrete category draws on the closed [0, 1] interval.

    A draw ``x`` belongs to the first class whose threshold satisfies
    ``x <= threshold``; draws above every threshold go to the last class.
    """

    model_config = ConfigDict(extra="forbid")

    n_draws: int = Field(default=1000, ge=1, le=10_000_000)
    labels: list[str] = Field(default=["A", "B", "C"], min_length=1)
    thresholds: list[float] = Field(
        default=[0.5, 0.65],
        description="Upper bound (inclusive) of every class but the last",
    )

    @model_validator(mode="after")
    def _validate_thresholds(self) -> ClassesConfig:
        if len(self.thresholds) != len(self.labels) - 1:
            raise ValueError(
                f"Expected {len(self.labels) - 1} thresholds for {len(self.labels)} labels, "
                f"got {len(self.thresholds)}"
            )
        if len(set(self.labels)) != len(self.labels):
            raise ValueError("labels must be unique")
        for t in self.thresholds:
            if not 0.0 < t < 1.0:
                raise ValueError(f"thresholds must lie strictly between 0 and 1, got {t}")
        for lo, hi in zip(self.thresholds, self.thresholds[1:]):
            if hi <= lo:
                raise ValueError("thresholds must be strictly increasing")
        return self


class ExponentialConfig(BaseModel):
    """Negative exponential draws and their histogram."""

    model_config = ConfigDict(extra="forbid")

    mean: float = Field(default=11.0, gt=0)
    n_draws: int = Field(default=10_000, ge=1, le=10_000_000)
    n_bins: int = Field(
        default=22,
        ge=2,
        le=10_000,
        description="Unit-width bins; the last one collects everything beyond",
    )


class ExperimentConfig(BaseModel):
    """Bundle of everything one experiment run needs."""

    model_config = ConfigDict(extra="forbid")

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    uniform: UniformConfig = Field(default_factory=UniformConfig)
    classes: ClassesConfig = Field(default_factory=ClassesConfig)
    exponential: ExponentialConfig = Field(default_factory=ExponentialConfig)
