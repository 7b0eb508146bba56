"""
Solvers: one module per puzzle day.

Every module exposes part1(text), part2(text) and solve(text, receipts);
solve() computes both answers once and records its facts into the given
Receipts section. The runner maps day numbers to modules (see runner.DAYS).
"""


class UnsolvableError(Exception):
    """Raised when no consistent answer exists for a well-formed input."""
    pass


__all__ = ["UnsolvableError"]
