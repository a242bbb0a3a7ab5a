"""
Coverage comparison between a baseline and a candidate translation set
"""

from decimal import Decimal, ROUND_HALF_UP

from ..models.translation import TranslationSet, ComparisonResult


class InvalidInputError(ValueError):
    """Raised when a comparison cannot be computed from its inputs"""


def validate_baseline(baseline: TranslationSet) -> None:
    """Reject a baseline without keys, coverage against it is undefined"""
    if not baseline:
        raise InvalidInputError("Baseline translation set has no keys; coverage is undefined")


def coverage_percent(candidate_count: int, baseline_count: int) -> str:
    """
    Candidate key count relative to the baseline, as a percentage string

    Rounded to one decimal place, halves away from zero.
    """
    ratio = Decimal(candidate_count) * 100 / Decimal(baseline_count)
    return str(ratio.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def compare(baseline: TranslationSet, candidate: TranslationSet, candidate_id: str) -> ComparisonResult:
    """
    Compare candidate keys against baseline keys
    
    Args:
        baseline: Source-of-truth translations
        candidate: Translations being checked
        candidate_id: Locale identifier of the candidate
        
    Returns:
        ComparisonResult with missing keys in baseline order and extra keys
        in candidate order
        
    Raises:
        InvalidInputError: If the baseline is empty
    """
    validate_baseline(baseline)

    missing = tuple(key for key in baseline if key not in candidate)
    extra = tuple(key for key in candidate if key not in baseline)

    return ComparisonResult(
        locale=candidate_id,
        total_keys=len(candidate),
        baseline_keys=len(baseline),
        missing=missing,
        extra=extra,
        coverage=coverage_percent(len(candidate), len(baseline)),
        is_complete=not missing and not extra
    )
