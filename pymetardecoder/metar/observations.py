################################################################################
# pymetardecoder/metar/observations.py
#
# Observation classes from METAR
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import re
from pymetardecoder import Observation, InvalidCode, char_at, read_chars
from . import code_tables as ct
################################################################################
# SHARED CLASSES
################################################################################
class Day(Observation):
    """
    Day of observation
    """
    _VALID_RANGE = (1, 31)
class Hour(Observation):
    """
    Hour of observation
    """
    _VALID_RANGE = (0, 23)
class Minute(Observation):
    """
    Minute of observation
    """
    _VALID_RANGE = (0, 59)
class Direction(Observation):
    """
    Direction in degrees
    """
    _VALID_RANGE = (0, 360)
    _UNIT = "deg"
class Speed(Observation):
    """
    Wind or gust speed. Unit is given by the wind group
    """
    _VALID_REGEXP = r"^\d{2,3}$"
class LayerHeight(Observation):
    """
    Height of a layer, coded in hundreds of feet
    """
    _VALID_REGEXP = r"^\d{3}$"
    _UNIT = "ft"
    def _decode_convert(self, val, **kwargs):
        return val * 100
class SignedTemperature(Observation):
    """
    Temperature in tenths of a degree with separate sign value
    """
    _VALID_REGEXP = r"^\d{3}$"
    _UNIT = "Cel"
    def _decode(self, raw, **kwargs):
        sign = kwargs.get("sign")
        if str(sign) not in ["0", "1"]:
            raise InvalidCode(sign, "temperature sign")
        return self._decode_value(raw, sign=sign)
    def _decode_convert(self, val, **kwargs):
        factor = 10 if str(kwargs.get("sign")) == "0" else -10
        return val / factor
class Temperature(Observation):
    """
    Temperature in whole degrees, M marks a sub-zero value
    """
    _VALID_REGEXP = r"^M?\d{1,3}$"
    _UNIT = "Cel"
    def _decode(self, raw, **kwargs):
        if raw.startswith("M"):
            data = self._decode_value(raw[1:])
            data["value"] = -data["value"]
            return data
        return self._decode_value(raw)
################################################################################
# GROUP CLASSES
################################################################################
class ObservationTime(Observation):
    """
    Observation time

    * YYGGggZ - day, hour and minute of observation (UTC)
    """
    _VALID_REGEXP = r"^.*Z$"
    _COMPONENTS = [
        ("day", 0, 2, Day),
        ("hour", 2, 2, Hour),
        ("minute", 4, 2, Minute)
    ]
    def _decode(self, raw, **kwargs):
        data = super()._decode(raw, **kwargs)
        for name, value in data.items():
            if value is None:
                raise InvalidCode(raw, "observation {}".format(name))
        return data
class ReportModifier(Observation):
    """
    Report modifier

    * AUTO - fully automated report
    * COR  - corrected report
    """
    _VALID_VALUES = ct.ReportModifier.codes()
    _CODE_TABLE = ct.ReportModifier
class SurfaceWind(Observation):
    """
    Surface wind

    * dddff(f)(Gfmfm(fm))KT or MPS - direction, speed and gust speed
    """
    _VALID_REGEXP = r"^.*(KT|MPS)$"
    def _decode(self, group, **kwargs):
        unit = "KT" if group.endswith("KT") else "m/s"

        # Direction, or VRB for variable direction
        ddd = read_chars(group, 0, 3)
        if ddd == "VRB":
            direction = None
            variable = True
        else:
            direction = Direction().decode(ddd)
            variable = False

        # The speed has three digits if there is a digit at position 5
        pos = self._speed_length(group, 3)
        speed = Speed().decode(read_chars(group, 3, pos - 3), unit=unit)
        if speed is None:
            return None

        # Gusts follow the G marker
        gust = None
        if char_at(group, pos) == "G":
            pos += 1
            end = self._speed_length(group, pos)
            gust = Speed().decode(read_chars(group, pos, end - pos), unit=unit)

        return {
            "direction": direction,
            "variable": variable,
            "speed": speed,
            "gust": gust,
            "variable_direction": None
        }
    def _speed_length(self, group, start):
        """
        Returns the position after a two or three digit speed starting at start
        """
        probe = char_at(group, start + 2)
        if probe is None:
            raise IndexError("speed in {} is truncated".format(group))
        return start + (3 if probe.isdigit() else 2)
class VariableWindDirection(Observation):
    """
    Extremes of variable wind direction

    * dndndnVdxdxdx
    """
    _VALID_REGEXP = r"^\d{3}V\d{3}$"
    _COMPONENTS = [
        ("min", 0, 3, Direction),
        ("max", 4, 3, Direction)
    ]
class Visibility(Observation):
    """
    Prevailing visibility

    * CAVOK     - ceiling and visibility OK (10 km or more)
    * 9999      - 10 km or more
    * (M)VVVVSM - statute miles, may be a whole number and fraction split
                  over two groups (e.g. 1 3/4SM). M means less than
    * (M)VVKM   - kilometres
    * (M)VVVV   - metres
    """
    _VALID_REGEXP = r"^(CAVOK|M?\d+|M?(\d+ )?[\d/]+(SM|KM))$"
    def _decode(self, group, **kwargs):
        if group == "CAVOK":
            return { "value": 10, "unit": "km", "less_than": False, "cavok": True }
        if group == "9999":
            return { "value": 10, "unit": "km", "less_than": False, "cavok": False }

        # Less than marker
        less_than = group.startswith("M")
        if less_than:
            group = group[1:]

        # Metres
        if not group.endswith(("SM", "KM")):
            return { "value": int(group), "unit": "m", "less_than": less_than, "cavok": False }

        # Miles or kilometres, with optional fraction
        unit = "SM" if group.endswith("SM") else "km"
        parts = group[:-2].split(" ")
        if len(parts) == 2:
            (whole, fraction) = parts
        elif "/" in parts[0]:
            (whole, fraction) = ("0", parts[0])
        else:
            (whole, fraction) = (parts[0], None)
        value = float(whole)
        if fraction is not None:
            (numerator, denominator) = fraction.split("/")
            value += float(numerator) / float(denominator)
        return { "value": value, "unit": unit, "less_than": less_than, "cavok": False }
class RunwayVisualRange(Observation):
    """
    Runway visual range

    * RDRDR/VRVRVRVRFT or RDRDR/VnVnVnVnVVxVxVxVxFT
    """
    _VALID_REGEXP = r"^R\d"
    def _decode(self, group, **kwargs):
        runway = int(read_chars(group, 1, 2))

        # Approach direction of parallel runways
        pos = 3
        approach = None
        if read_chars(group, pos, 1) != "/":
            approach = ct.RunwayApproach().decode(group[pos])
            pos += 1
        if read_chars(group, pos, 1) != "/":
            raise InvalidCode(group, "runway visual range")
        pos += 1

        # Outside the reportable values
        (code, modifier) = ct.RunwayRangeModifier().match(group, pos)
        if code is not None:
            pos += len(code)

        lowest = self.Range().decode(read_chars(group, pos, 4))
        pos += 4
        highest = None
        if char_at(group, pos) == "V":
            highest = self.Range().decode(read_chars(group, pos + 1, 4))

        return {
            "runway": runway,
            "approach_direction": approach,
            "modifier": modifier,
            "lowest": lowest,
            "highest": highest
        }
    class Range(Observation):
        _VALID_REGEXP = r"^\d{4}$"
        _UNIT = "ft"
class Weather(Observation):
    """
    Present weather

    * (+/-/VC)(DD)PP - intensity, descriptor and phenomena
    """
    _VALID_REGEXP = "^({}|{}|{})".format(
        ct.WeatherIntensity.regexp(),
        ct.WeatherDescriptor.regexp(),
        ct.WeatherPhenomena.regexp()
    )
    def _decode(self, group, **kwargs):
        pos = 0
        (code, intensity) = ct.WeatherIntensity().match(group, pos)
        if code is not None:
            pos += len(code)
        (code, descriptor) = ct.WeatherDescriptor().match(group, pos)
        if code is not None:
            pos += len(code)

        # Without phenomena there is nothing to report
        (code, phenomena) = ct.WeatherPhenomena().match(group, pos)
        if code is None:
            return None
        return {
            "intensity": intensity,
            "descriptor": descriptor,
            "phenomena": phenomena
        }
class SkyCondition(Observation):
    """
    Sky condition

    * NsNsNshshshs(CB/TCU) - cover, height and cloud type
    * VVhshshs             - vertical visibility
    * SKC/CLR/NSC          - no cloud
    """
    _VALID_REGEXP = "^({})".format(ct.SkyCover.regexp())
    _LAYERS = ["FEW", "SCT", "BKN", "OVC"]
    def _decode(self, group, **kwargs):
        (code, cover) = ct.SkyCover().match(group)
        height = None
        modifier = None
        if code in self._LAYERS or code == "VV":
            height = LayerHeight().decode(read_chars(group, len(code), 3))
        if code in self._LAYERS and len(group) > 6:
            cloud = group[6:]
            if cloud in ct.CloudType.codes():
                modifier = ct.CloudType().decode(cloud)
            else:
                modifier = cloud
        return {
            "cover": cover,
            "height": height,
            "modifier": modifier
        }
class TemperatureDewPoint(Observation):
    """
    Temperature and dew point

    * (M)T'T'/(M)T'dT'd
    """
    _VALID_REGEXP = r"^.*/"
    def _decode(self, group, **kwargs):
        (temperature, dew_point) = group.split("/", 1)
        return {
            "air_temperature": Temperature().decode(temperature),
            "dewpoint_temperature": Temperature().decode(dew_point)
        }
class Altimeter(Observation):
    """
    Altimeter setting

    * APhPhPhPh - inches of mercury, in hundredths
    """
    _VALID_REGEXP = r"^A"
    def _decode(self, group, **kwargs):
        return self.Pressure().decode(read_chars(group, 1, 4))
    class Pressure(Observation):
        _VALID_REGEXP = r"^\d{4}$"
        _UNIT = "inHg"
        def _decode_convert(self, val, **kwargs):
            return val / 100
class PreciseTemperature(Observation):
    """
    Hourly temperature and dew point to the tenth of a degree (remarks)

    * TsnT'T'T'snT'dT'dT'd
    """
    _VALID_REGEXP = r"^T\d{8}$"
    def _decode(self, group, **kwargs):
        return {
            "air_temperature": SignedTemperature().decode(group[2:5], sign=group[1]),
            "dewpoint_temperature": SignedTemperature().decode(group[6:9], sign=group[5])
        }
class Obscuration(Observation):
    """
    Obscuration (remarks). Phenomena followed by a layer group

    * w'w' NsNsNshshshs - e.g. FG FEW000
    """
    _VALID_REGEXP = r"^({}) ({})\d{{3}}".format(
        ct.ObscurationPhenomena.regexp(),
        ct.ObscurationIntensity.regexp()
    )
    def _decode(self, group, **kwargs):
        (phenomena, layer) = group.split(" ")
        return {
            "phenomena": ct.ObscurationPhenomena().decode(phenomena),
            "intensity": ct.ObscurationIntensity().decode(layer[0:3]),
            "height": LayerHeight().decode(layer[3:6])
        }
