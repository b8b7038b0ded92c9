"""Genome validation.

A genome is valid when it is exactly 1000 symbols long and every symbol
belongs to the 8-symbol alphabet. Invalid symbols are enumerated up to a
report cap; the remainder is summarised in a single trailing issue while
``invalid_symbol_count`` always holds the true total.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from genomorph.model.genome import GENOME_LENGTH, VALID_SYMBOLS, Genome, as_sequence

logger = logging.getLogger(__name__)

DEFAULT_REPORT_CAP = 10


class IssueKind(StrEnum):
    """Kinds of validation issue."""

    INVALID_LENGTH = "invalid_length"
    INVALID_SYMBOL = "invalid_symbol"
    TRUNCATED = "truncated"


@dataclass(frozen=True)
class ValidationIssue:
    """One reported validation problem."""

    kind: IssueKind
    message: str
    position: int | None = None
    symbol: str | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of ``validate_genome``.

    Attributes:
        issues: Reported issues, invalid symbols capped at the report cap.
        length: Observed genome length.
        invalid_symbol_count: True number of invalid positions, uncapped.
    """

    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)
    length: int = GENOME_LENGTH
    invalid_symbol_count: int = 0

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def length_ok(self) -> bool:
        return self.length == GENOME_LENGTH

    @property
    def errors(self) -> list[str]:
        """Issue messages in report order."""
        return [issue.message for issue in self.issues]

    @property
    def invalid_positions(self) -> list[int]:
        """Positions of the reported (capped) invalid symbols."""
        return [
            issue.position
            for issue in self.issues
            if issue.kind == IssueKind.INVALID_SYMBOL and issue.position is not None
        ]

    @property
    def defect_count(self) -> int:
        """Length defect (0 or 1) plus the total number of invalid symbols."""
        return (0 if self.length_ok else 1) + self.invalid_symbol_count


class GenomeValidationError(ValueError):
    """Raised when a genome fails validation.

    The full ``ValidationResult`` is available as ``result``.
    """

    def __init__(self, result: ValidationResult) -> None:
        self.result = result
        super().__init__("; ".join(result.errors) or "Invalid genome")


def validate_genome(genome: Genome | str, report_cap: int | None = None) -> ValidationResult:
    """Check genome length and symbol membership.

    Args:
        genome: Genome value or raw sequence.
        report_cap: Number of invalid symbols enumerated individually.
            Defaults to ``EngineSettings.validation_report_cap``.

    Returns:
        ValidationResult; ``valid`` is True only if there are no issues.

    Example:
        >>> validate_genome("A" * 999).errors
        ['Genome length must be 1000, got 999']
    """
    if report_cap is None:
        from genomorph.config import get_engine_settings

        report_cap = get_engine_settings().validation_report_cap

    sequence = as_sequence(genome)
    issues: list[ValidationIssue] = []

    if len(sequence) != GENOME_LENGTH:
        issues.append(
            ValidationIssue(
                kind=IssueKind.INVALID_LENGTH,
                message=f"Genome length must be {GENOME_LENGTH}, got {len(sequence)}",
            )
        )

    invalid_count = 0
    for position, symbol in enumerate(sequence):
        if symbol in VALID_SYMBOLS:
            continue
        invalid_count += 1
        if invalid_count <= report_cap:
            issues.append(
                ValidationIssue(
                    kind=IssueKind.INVALID_SYMBOL,
                    message=f"Invalid symbol '{symbol}' at position {position}",
                    position=position,
                    symbol=symbol,
                )
            )

    if invalid_count > report_cap:
        remaining = invalid_count - report_cap
        issues.append(
            ValidationIssue(
                kind=IssueKind.TRUNCATED,
                message=f"... and {remaining} more invalid symbol(s)",
            )
        )

    return ValidationResult(
        issues=tuple(issues),
        length=len(sequence),
        invalid_symbol_count=invalid_count,
    )


def ensure_valid(genome: Genome | str, report_cap: int | None = None) -> Genome:
    """Validate and return the genome as a ``Genome`` value.

    Raises:
        GenomeValidationError: If the genome is invalid.
    """
    result = validate_genome(genome, report_cap=report_cap)
    if not result.valid:
        logger.warning(
            "Genome validation failed with %d defect(s): %s",
            result.defect_count,
            result.errors[0],
        )
        raise GenomeValidationError(result)
    if isinstance(genome, Genome):
        return genome
    return Genome(genome)
