"""Data validation schemas using Pandera for exported index tables."""

import pandas as pd
import pandera.pandas as pa

from ..config import constants


# Long-format index table, one row per geography and quarter
export_schema = pa.DataFrameSchema({
    "geo": pa.Column(
        str,
        nullable=False,
        coerce=True,
        description="Display name of the geography"
    ),
    "code": pa.Column(
        str,
        nullable=False,
        coerce=True,
        description="Geography key (postal code, zip3, CBSA code, ...)"
    ),
    "date": pa.Column(
        int,
        nullable=False,
        coerce=True,
        checks=[
            pa.Check.in_range(
                10 * constants.MIN_YEAR + 1,
                10 * constants.MAX_YEAR + 4
            ),
            pa.Check(lambda s: s.mod(10).between(1, 4).all(),
                    error="Quarter digit must be 1-4")
        ],
        description="Year-quarter code (CCYYQ)"
    ),
    "index": pa.Column(
        float,
        nullable=False,
        checks=[pa.Check.greater_than(0)],
        description="House price index (not seasonally adjusted)"
    )
})


def validate_export(df: pd.DataFrame) -> pd.DataFrame:
    """
    Validate an exported index table against schema.
    
    Parameters
    ----------
    df : pd.DataFrame
        Long-format index table
        
    Returns
    -------
    pd.DataFrame
        Validated table
        
    Raises
    ------
    pa.errors.SchemaError
        If validation fails
    """
    return export_schema.validate(df)
