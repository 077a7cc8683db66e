################################################################################
# pymetardecoder/metar/code_tables.py
#
# Code tables for decoding METARs
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
from pymetardecoder.code_tables import CodeTableLookup
################################################################################
# CODE TABLE CLASSES
################################################################################
class ReportModifier(CodeTableLookup):
    """
    Report modifier
    """
    _TABLE = "report modifier"
    _VALUES = [
        ("AUTO", "automated"),
        ("COR",  "corrected")
    ]
class WeatherIntensity(CodeTableLookup):
    """
    Intensity or proximity of present weather. Moderate intensity has no code
    """
    _TABLE = "weather intensity"
    _VALUES = [
        ("+",  "heavy"),
        ("-",  "light"),
        ("VC", "in_vicinity")
    ]
class WeatherDescriptor(CodeTableLookup):
    """
    Descriptor of present weather
    """
    _TABLE = "weather descriptor"
    _VALUES = [
        ("MI", "shallow"),
        ("PR", "partial"),
        ("BC", "patches"),
        ("DR", "low_drifting"),
        ("BL", "blowing"),
        ("SH", "showers"),
        ("TS", "thunderstorm"),
        ("FZ", "freezing")
    ]
class WeatherPhenomena(CodeTableLookup):
    """
    Weather phenomena: precipitation, obscuration and other
    """
    _TABLE = "weather phenomena"
    _VALUES = [
        # Precipitation
        ("DZ", "drizzle"),
        ("RA", "rain"),
        ("SN", "snow"),
        ("SG", "snow_grains"),
        ("IC", "ice_crystals"),
        ("PL", "ice_pellets"),
        ("GR", "hail"),
        ("GS", "small_hail"),
        ("UP", "unknown_precipitation"),
        # Obscuration
        ("BR", "mist"),
        ("FG", "fog"),
        ("FU", "smoke"),
        ("VA", "volcanic_ash"),
        ("DU", "widespread_dust"),
        ("SA", "sand"),
        ("HZ", "haze"),
        ("PY", "spray"),
        # Other
        ("PO", "dust_sand_whirls"),
        ("SQ", "squalls"),
        ("FC", "funnel_cloud"),
        ("SS", "sandstorm"),
        ("DS", "duststorm")
    ]
class SkyCover(CodeTableLookup):
    """
    Amount of sky cover
    """
    _TABLE = "sky cover"
    _VALUES = [
        ("VV",  "vertical_visibility"),
        ("SKC", "clear_manual"),
        ("CLR", "clear_automated"),
        ("FEW", "few"),
        ("SCT", "scattered"),
        ("BKN", "broken"),
        ("OVC", "overcast"),
        ("NSC", "no_significant_clouds")
    ]
class CloudType(CodeTableLookup):
    """
    Significant convective cloud type following a layer
    """
    _TABLE = "cloud type"
    _VALUES = [
        ("CB",  "cumulonimbus"),
        ("TCU", "towering_cumulus")
    ]
class ObscurationPhenomena(CodeTableLookup):
    """
    Obscuring phenomena reported in remarks
    """
    _TABLE = "obscuration phenomena"
    _VALUES = [
        ("BR", "mist"),
        ("FG", "fog"),
        ("FU", "smoke"),
        ("VA", "volcanic_ash"),
        ("DU", "widespread_dust"),
        ("SA", "sand"),
        ("HZ", "haze"),
        ("PY", "spray")
    ]
class ObscurationIntensity(CodeTableLookup):
    """
    Intensity of an obscuration, coded with the sky cover contractions
    """
    _TABLE = "obscuration intensity"
    _VALUES = [
        ("FEW", "slight"),
        ("SCT", "moderate"),
        ("BKN", "heavy"),
        ("OVC", "severe")
    ]
class RunwayApproach(CodeTableLookup):
    """
    Approach direction of parallel runways
    """
    _TABLE = "runway approach direction"
    _VALUES = [
        ("L", "L"),
        ("R", "R"),
        ("C", "C")
    ]
class RunwayRangeModifier(CodeTableLookup):
    """
    Runway visual range outside the reportable values
    """
    _TABLE = "runway visual range modifier"
    _VALUES = [
        ("M", "below_minimum"),
        ("P", "above_maximum")
    ]
