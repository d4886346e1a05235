"""Row-wise validation of polars DataFrames.

Each row is handed to a ModelValidator as a ``{column: value}`` dict, so a
ModelSchema written for mappings (for example one built by
``parse_schema``) applies directly to tabular data.
"""

import logging
from enum import Enum

import polars as pl

from vouch.core.contract import require
from vouch.core.exceptions import ContractViolation, MissingValueError
from vouch.validation.report import ValidationReport, create_report
from vouch.validation.result import ValidationResult
from vouch.validation.validator import ModelValidator

logger = logging.getLogger(__name__)


class ValidationMode(Enum):
    """Frame validation execution mode.

    Attributes:
        FAIL_FAST: Stop after the first invalid row
        CONTINUE: Validate every row regardless of failures
    """

    FAIL_FAST = "fail_fast"
    CONTINUE = "continue"


def validate_frame(
    df: pl.DataFrame,
    validator: ModelValidator,
    mode: ValidationMode = ValidationMode.CONTINUE,
) -> ValidationReport:
    """Validate every row of ``df`` and aggregate the results.

    Rows are labelled ``row <index>`` in the report. Columns named by the
    schema but absent from the frame read as None.

    Args:
        df: DataFrame to validate (not modified)
        validator: ModelValidator with an explicit schema
        mode: FAIL_FAST stops after the first invalid row

    Returns:
        ValidationReport with one result per validated row

    Raises:
        MissingValueError: If df is None
        ContractViolation: If the validator has no explicit schema

    Example:
        >>> schema = parse_schema({"properties": [
        ...     {"name": "account", "rule": "string", "params": {"pattern": "[0-9]{4}"}},
        ... ]})
        >>> report = validate_frame(df, ModelValidator(schema))
        >>> report.is_valid()
        True
    """
    require(
        df is not None,
        lambda: MissingValueError("The frame passed for validation was None", parameter="df"),
    )
    require(
        validator.schema is not None,
        lambda: ContractViolation(
            "Frame validation needs a ModelValidator with an explicit schema"
        ),
    )

    results: list[ValidationResult] = []

    for index, row in enumerate(df.iter_rows(named=True)):
        result = validator.validate(row)
        result.subject = f"row {index}"
        results.append(result)

        if mode == ValidationMode.FAIL_FAST and result.has_errors():
            logger.debug("Stopping frame validation at invalid row %d", index)
            break

    report = create_report(results)
    logger.debug(report.summary())
    return report
