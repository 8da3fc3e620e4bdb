"""
Metal column detection
"""
from config.constants import NON_METAL_COLUMNS
from hmpi.models.sample import MetalColumnSet, RawSample, normalize_key


def is_metal_column(column: str) -> bool:
    return normalize_key(column) not in NON_METAL_COLUMNS


def classify(sample: RawSample) -> MetalColumnSet:
    """
    Every column of ``sample`` that is not an identifier or coordinate,
    in the sample's column order.
    """
    return MetalColumnSet(tuple(column for column in sample.columns if is_metal_column(column)))
