################################################################################
# pymetardecoder/conversion.py
#
# Conversion functions for pymetardecoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
KM_PER_MILE = 1.609344
M_PER_MILE  = 1609.344

# Factors to convert each unit to the base unit of its type
LENGTHS = {
    "m": 1, "km": 1000, "SM": M_PER_MILE, "ft": 0.3048
}
SPEEDS = {
    "m/s": 1, "KT": 1852 / 3600, "mph": 0.44704
}
PRESSURES = {
    "Pa": 1, "hPa": 100, "inHg": 3386.389
}
################################################################################
# EXCEPTION CLASSES
################################################################################
class ConversionError(Exception):
    def __init__(self, val, unit_from, unit_to):
        self.msg = "Cannot convert {} from {} to {}".format(val, unit_from, unit_to)
        super().__init__(self.msg)
################################################################################
# FUNCTIONS
################################################################################
def _convert(x, factor=1, intercept=0):
    """
    Converts a value using y = mx + c
    """
    return (factor * x) + intercept
def convert(val, unit_from, unit_to, unit_type):
    """
    Converts value from one unit to another

    :param numeric val: Value to convert
    :param str unit_from: Convert from this unit
    :param str unit_to: Convert to this unit
    :param str unit_type: Type of unit
    :returns: Converted value
    :rtype: numeric
    """
    # Run the appropriate conversion function
    if unit_type == "length":
        return _convert_factor(val, unit_from, unit_to, LENGTHS)
    elif unit_type == "pressure":
        return _convert_factor(val, unit_from, unit_to, PRESSURES)
    elif unit_type == "speed":
        return _convert_factor(val, unit_from, unit_to, SPEEDS)
    elif unit_type == "temperature":
        return _convert_temp(val, unit_from, unit_to)
    else:
        raise ValueError("Cannot convert unit type '{}'".format(unit_type))
def _convert_factor(val, unit_from, unit_to, factors):
    """
    Converts values from one unit to another using a table of factors

    :param numeric val: Value to convert
    :param str unit_from: Unit to convert from
    :param str unit_to: Unit to convert to
    :param dict factors: Factor for each unit to its base unit
    :returns: Converted value
    :rtype: numeric
    """
    if unit_from == unit_to:
        return val

    # Miles to kilometres (and back) use the exact constant
    if (unit_from, unit_to) == ("SM", "km"):
        return _convert(val, factor=KM_PER_MILE)
    if (unit_from, unit_to) == ("km", "SM"):
        return val / KM_PER_MILE
    try:
        factor = factors[unit_from] / factors[unit_to]
        return _convert(val, factor=factor)
    except KeyError:
        raise ConversionError(val, unit_from, unit_to)
def _convert_temp(val, unit_from, unit_to):
    """
    Converts temperature values from one unit to another

    :param numeric val: Value to convert
    :param str unit_from: Unit to convert from
    :param str unit_to: Unit to convert to
    :returns: Converted value
    :rtype: numeric
    """
    if unit_from == unit_to:
        return val
    if unit_from == "Cel":
        if unit_to == "degF":
            return _convert(val, factor=(9/5), intercept=32)
        elif unit_to == "K":
            return _convert(val, intercept=273.15)
    elif unit_from == "degF":
        if unit_to == "Cel":
            return _convert((val - 32), factor=(5/9))

    # If we have reached this point, we are unable to convert
    raise ConversionError(val, unit_from, unit_to)
