"""
Pandera schema for export-ready tables.

Column names must be unique and usable as markup element names.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.errors import SchemaErrors

from exportclean.normalization.tags import is_element_name
from exportclean.utils.logging import get_logger

log = get_logger(__name__)

ELEMENT_NAME_CHECK = "valid_element_names"
ELEMENT_NAME_ERROR = "column names must be valid XML element names"


def invalid_element_names(columns: pd.Index) -> list[str]:
    """
    List the column labels that cannot be written as XML element names.

    Args:
        columns: Column labels of a DataFrame.

    Returns:
        Offending labels as text, in column order.
    """
    return [
        str(col) for col in columns if not (isinstance(col, str) and is_element_name(col))
    ]


def _element_names_are_valid(df: pd.DataFrame) -> bool:
    return not invalid_element_names(df.columns)


EXPORT_FRAME_SCHEMA = pa.DataFrameSchema(
    name="ExportFrameSchema",
    unique_column_names=True,
    checks=[
        pa.Check(
            _element_names_are_valid,
            name=ELEMENT_NAME_CHECK,
            error=ELEMENT_NAME_ERROR,
        ),
    ],
)


def validate_export_frame(
    df: pd.DataFrame,
    *,
    raise_on_error: bool = True,
) -> list[str]:
    """
    Check that a DataFrame can be exported with its column names as tags.

    Args:
        df: DataFrame to check.
        raise_on_error: Whether to raise on the first problem.

    Returns:
        List of problem descriptions (empty when the frame is valid).

    Raises:
        pandera.errors.SchemaError: If raise_on_error and the frame is invalid.
    """
    if raise_on_error:
        EXPORT_FRAME_SCHEMA.validate(df)
        return []

    try:
        EXPORT_FRAME_SCHEMA.validate(df, lazy=True)
    except SchemaErrors as e:
        # The element-name check covers the whole frame, so its failure case
        # is a bare False; name the offending columns instead.
        problems = [
            f"{row.check}: {row.failure_case}"
            for row in e.failure_cases.itertuples(index=False)
            if row.check not in (ELEMENT_NAME_CHECK, ELEMENT_NAME_ERROR)
        ]
        problems.extend(
            f"invalid element name: {name!r}"
            for name in invalid_element_names(df.columns)
        )
        log.warning("Export validation failed", problems=problems)
        return problems

    return []
