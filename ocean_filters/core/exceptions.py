class OceanFiltersError(Exception):
    """Base exception for all ocean_filters errors"""
    pass

class UnknownDimensionError(OceanFiltersError, KeyError):
    """A dimension name or nested sub-key that the filter specification does not define"""
    pass

class FilterValueError(OceanFiltersError, ValueError):
    """
    A user supplied value that cannot be installed in the specification:
    unparsable numbers, inverted ranges, out-of-bounds coordinates, values
    outside an enumeration, etc
    """
    pass

class PresetNameError(OceanFiltersError, ValueError):
    """Preset name is missing or blank"""
    pass
