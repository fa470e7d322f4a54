"""Known-answer checks against published MT19937 output."""

from __future__ import annotations

from dataclasses import dataclass

from mtsample.core.generator import MersenneTwister
from mtsample.io.yaml_loader import load_package_yaml

REFERENCE_FILE = "data/reference_vectors.yaml"


@dataclass(frozen=True)
class ReferenceCheck:
    """Result of comparing one reference vector with generated output."""

    name: str
    expected: tuple[int, ...]
    actual: tuple[int, ...]

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


def check_reference_vectors() -> list[ReferenceCheck]:
    """Regenerate every packaged reference vector and compare."""
    vectors = load_package_yaml(REFERENCE_FILE)
    checks = []
    for name, vector in vectors.items():
        if "key" in vector:
            gen = MersenneTwister(key=vector["key"])
        else:
            gen = MersenneTwister(vector["seed"])
        expected = tuple(int(v) for v in vector["u32"])
        actual = tuple(gen.next_u32() for _ in expected)
        checks.append(ReferenceCheck(name=name, expected=expected, actual=actual))
    return checks
