from config.constants import HPI_THRESHOLDS, WaterQualityCategory


def categorize_water_quality(hpi: float) -> str:
    """
    Map an HPI value to a water quality category.

    Lower bounds are inclusive: exactly 100 is Slightly Polluted and exactly
    200 is Hazardous. HEI and Cd do not affect the category. The index
    functions never return a non-finite HPI; NaN would land in Hazardous.
    """
    if hpi < HPI_THRESHOLDS[WaterQualityCategory.SLIGHTLY_POLLUTED]:
        return WaterQualityCategory.SAFE
    if hpi < HPI_THRESHOLDS[WaterQualityCategory.HAZARDOUS]:
        return WaterQualityCategory.SLIGHTLY_POLLUTED
    return WaterQualityCategory.HAZARDOUS
