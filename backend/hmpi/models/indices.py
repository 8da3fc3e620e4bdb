"""
Heavy metal pollution indices

All three indices are built from the ratio of each metal's concentration
to its permissible standard:

    HPI = sum(w_i * q_i) / sum(w_i),  w_i = 1 / S_i,  q_i = (C_i / S_i) * 100
    HEI = sum(C_i / S_i)
    Cd  = sum(C_i / S_i)

HEI and Cd share a formula but are reported separately because they are read
against different reference scales. An index that overflows to a non-finite
value is reported as 0, the same as an unparseable concentration.
"""
from hmpi.models.common import finite_or_default
from hmpi.models.sample import MetalColumnSet, RawSample
from hmpi.models.standards import StandardsTable


def calculate_hpi(sample: RawSample, metals: MetalColumnSet, standards: StandardsTable) -> float:
    """Heavy Metal Pollution Index: weighted mean of per-metal sub-indices."""
    weighted_sum = 0.0
    total_weight = 0.0

    for metal in metals:
        concentration = sample.concentration(metal)
        standard = standards.lookup(metal)

        # Stricter standards weigh more
        weight = 1.0 / standard
        sub_index = (concentration / standard) * 100.0

        weighted_sum += weight * sub_index
        total_weight += weight

    if total_weight <= 0:
        return 0.0
    return finite_or_default(weighted_sum / total_weight)


def calculate_hei(sample: RawSample, metals: MetalColumnSet, standards: StandardsTable) -> float:
    """Heavy Metal Evaluation Index."""
    total = 0.0
    for metal in metals:
        total += sample.concentration(metal) / standards.lookup(metal)
    return finite_or_default(total)


def calculate_cd(sample: RawSample, metals: MetalColumnSet, standards: StandardsTable) -> float:
    """Contamination Degree: sum of per-metal contamination factors."""
    total = 0.0
    for metal in metals:
        contamination_factor = sample.concentration(metal) / standards.lookup(metal)
        total += contamination_factor
    return finite_or_default(total)
