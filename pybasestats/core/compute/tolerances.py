"""
Tolerance tiers for numerical validation.

Defines precision expectations for comparing computed statistics against
reference values:
- CPU_FP64: closed-form statistics over short samples, machine precision
- CPU_FP64_SUMMATION: long samples where summation order differs from the
  reference implementation (e.g. numpy pairwise sum vs. a naive loop)

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-14,
    name='cpu_fp64',
    description='CPU double precision, short samples',
)

CPU_FP64_SUMMATION = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='cpu_fp64_summation',
    description='CPU double precision, long samples with reordered sums',
)
