"""
Coefficient table files.

Tables are headerless two-column CSV files, one (angle of attack in
degrees, coefficient) sample per row with strictly increasing angles.
"""

import logging
from pathlib import Path
from typing import Union

import pandas as pd

from archimedes import struct

from ..core.interpolation import Linear

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@struct(frozen=True)
class AeroTables:
    """Lift, drag and pitching-moment tables shared by a vehicle's aerofoils."""

    cl: Linear
    cd: Linear
    cm: Linear


def read_table_csv(csv_file: PathLike) -> pd.DataFrame:
    """
    Read a two-column coefficient CSV.

    Lines starting with '#' are ignored.

    Returns
    -------
    pd.DataFrame
        Columns 'alpha' (deg) and 'coefficient'
    """
    df = pd.read_csv(csv_file, header=None, comment='#', skipinitialspace=True)

    if df.shape[1] < 2:
        raise ValueError(f"Coefficient table {csv_file} needs two columns, found {df.shape[1]}")

    df = df.iloc[:, :2].astype(float)
    df.columns = ['alpha', 'coefficient']
    return df


def load_coefficient_table(csv_file: PathLike, extrapolate: bool = True) -> Linear:
    """Load a coefficient CSV into a Linear table."""
    df = read_table_csv(csv_file)
    table = Linear(df[['alpha', 'coefficient']].to_numpy(), extrapolate=extrapolate)

    lo, hi = table.domain
    logger.info("Loaded %s: %d samples, alpha %.1f to %.1f deg", csv_file, len(table), lo, hi)
    return table


def load_coefficient_tables(lift: PathLike, drag: PathLike, moment: PathLike,
                            extrapolate: bool = True) -> AeroTables:
    """
    Load the three tables for an aerofoil set.

    Parameters
    ----------
    lift, drag, moment : str or Path
        CSV files for CL, CD and Cm
    extrapolate : bool, optional
        Passed through to each Linear table
    """
    return AeroTables(
        cl=load_coefficient_table(lift, extrapolate),
        cd=load_coefficient_table(drag, extrapolate),
        cm=load_coefficient_table(moment, extrapolate),
    )
