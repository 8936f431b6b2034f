"""Tabular export of HOR runs."""

import pandas as pd

from asat_hor.core.hor import HOR


RUN_COLUMNS = [
    "label", "family", "chromosomes", "haplotype",
    "start_ordinal", "end_ordinal", "direction", "length"
]


def runs_to_dataframe(hor: HOR) -> pd.DataFrame:
    """
    Create a run table with one row per run, in assembly order.

    Args:
        hor: HOR to tabulate

    Returns:
        DataFrame with columns RUN_COLUMNS
    """
    rows = []
    for run in hor:
        signature = run.signature
        rows.append({
            "label": run.render(),
            "family": signature.family,
            "chromosomes": "/".join(str(chrom) for chrom in signature.chromosomes),
            "haplotype": str(signature.haplotype),
            "start_ordinal": run.start_ordinal,
            "end_ordinal": run.end_ordinal,
            "direction": run.direction.value,
            "length": len(run)
        })

    return pd.DataFrame(rows, columns=RUN_COLUMNS)
