################################################################################
# pymetardecoder/metar/report.py
#
# Decoded METAR report
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import copy, json
from pymetardecoder import ObsEncoder, conversion
################################################################################
# REPORT CLASSES
################################################################################
class Metar(object):
    """
    A decoded METAR/SPECI report

    The decoded groups are held in a dict using the same layout as the
    observations that produced them. Groups that were not reported are None
    (or an empty list for repeatable groups). Once the decoder has finished,
    the report is frozen and can no longer be changed.

    :param string raw_text: The message the report was decoded from
    """
    def __init__(self, raw_text):
        self._frozen = False
        self.raw_text = raw_text
        self._data = {
            "station_id": None,
            "observation_time": None,
            "report_modifier": "unspecified",
            "wind": None,
            "visibility": None,
            "cavok": False,
            "runway_visual_range": [],
            "weather": [],
            "sky_conditions": [],
            "air_temperature": None,
            "dewpoint_temperature": None,
            "altimeter": None,
            "air_temperature_precise": None,
            "dewpoint_temperature_precise": None,
            "obscurations": [],
            "no_significant_change": False
        }
    def __setattr__(self, name, value):
        if getattr(self, "_frozen", False):
            raise AttributeError("decoded report is read-only")
        super().__setattr__(name, value)

    ### Used by the decoder ###
    def set(self, key, value):
        self._check_frozen()
        if key not in self._data:
            raise KeyError(key)
        self._data[key] = value
    def append(self, key, value):
        self._check_frozen()
        self._data[key].append(value)
    def set_visibility_miles(self, value, less_than=False):
        self._set_visibility(value, "SM", less_than)
    def set_visibility_kilometers(self, value, less_than=False):
        self._set_visibility(value, "km", less_than)
    def set_visibility_meters(self, value, less_than=False):
        self._set_visibility(value, "m", less_than)
    def set_cavok(self):
        """
        Sets CAVOK, which also means a visibility of 10 km or more
        """
        self.set("cavok", True)
        self.set_visibility_kilometers(10)
    def _set_visibility(self, value, unit, less_than):
        # Only one unit is ever stored
        self.set("visibility", { "value": value, "unit": unit, "less_than": less_than })
    def freeze(self):
        for key, value in self._data.items():
            if isinstance(value, list):
                self._data[key] = tuple(value)
        self._frozen = True
    def _check_frozen(self):
        if self._frozen:
            raise AttributeError("decoded report is read-only")

    ### Identification ###
    @property
    def station_id(self):
        return self._data["station_id"]
    @property
    def observation_time(self):
        return self._data["observation_time"]
    @property
    def report_modifier(self):
        return self._data["report_modifier"]

    ### Wind ###
    @property
    def wind_direction(self):
        """
        Wind direction in degrees, or None if variable or not reported
        """
        wind = self._data["wind"]
        if wind is None or wind["direction"] is None:
            return None
        return wind["direction"]["value"]
    @property
    def wind_direction_is_variable(self):
        wind = self._data["wind"]
        return wind is not None and wind["variable"]
    @property
    def wind_direction_min(self):
        return self._variable_direction("min")
    @property
    def wind_direction_max(self):
        return self._variable_direction("max")
    @property
    def wind_speed_knots(self):
        return self._wind_value("speed", "KT")
    @property
    def wind_speed_mps(self):
        return self._wind_value("speed", "m/s")
    @property
    def wind_speed_mph(self):
        """
        Wind speed rounded to the nearest mile per hour
        """
        return self._round(self._wind_value("speed", "mph"), 0)
    @property
    def wind_gust_knots(self):
        return self._wind_value("gust", "KT")
    @property
    def wind_gust_mps(self):
        return self._wind_value("gust", "m/s")
    @property
    def wind_gust_mph(self):
        return self._round(self._wind_value("gust", "mph"), 0)
    def _wind_value(self, attr, unit):
        wind = self._data["wind"]
        if wind is None or wind[attr] is None:
            return None
        return conversion.convert(wind[attr]["value"], wind[attr]["unit"], unit, "speed")
    def _variable_direction(self, attr):
        wind = self._data["wind"]
        if wind is None or wind["variable_direction"] is None:
            return None
        direction = wind["variable_direction"][attr]
        return None if direction is None else direction["value"]

    ### Visibility ###
    @property
    def visibility_miles(self):
        return self._visibility("SM")
    @property
    def visibility_kilometers(self):
        return self._visibility("km")
    @property
    def visibility_meters(self):
        return self._visibility("m")
    @property
    def visibility_less_than(self):
        visibility = self._data["visibility"]
        return visibility is not None and visibility["less_than"]
    @property
    def is_cavok(self):
        return self._data["cavok"]
    def _visibility(self, unit):
        visibility = self._data["visibility"]
        if visibility is None:
            return None
        return conversion.convert(visibility["value"], visibility["unit"], unit, "length")

    ### Temperature ###
    @property
    def temperature(self):
        return self._value("air_temperature")
    @property
    def dew_point(self):
        return self._value("dewpoint_temperature")
    @property
    def temperature_precise(self):
        return self._value("air_temperature_precise")
    @property
    def dew_point_precise(self):
        return self._value("dewpoint_temperature_precise")
    @property
    def temperature_most_precise(self):
        """
        Temperature from the remarks (tenths of a degree) if reported,
        otherwise the whole degree temperature
        """
        if self.temperature_precise is not None:
            return self.temperature_precise
        return self.temperature
    @property
    def dew_point_most_precise(self):
        if self.dew_point_precise is not None:
            return self.dew_point_precise
        return self.dew_point
    @property
    def temperature_fahrenheit(self):
        return self._fahrenheit(self.temperature)
    @property
    def dew_point_fahrenheit(self):
        return self._fahrenheit(self.dew_point)
    @property
    def temperature_precise_fahrenheit(self):
        return self._fahrenheit(self.temperature_precise)
    @property
    def dew_point_precise_fahrenheit(self):
        return self._fahrenheit(self.dew_point_precise)
    @property
    def temperature_most_precise_fahrenheit(self):
        return self._fahrenheit(self.temperature_most_precise)
    @property
    def dew_point_most_precise_fahrenheit(self):
        return self._fahrenheit(self.dew_point_most_precise)
    def _fahrenheit(self, val):
        # Nearest tenth of a degree
        if val is None:
            return None
        return self._round(conversion.convert(val, "Cel", "degF", "temperature"), 1)

    ### Pressure ###
    @property
    def pressure(self):
        """
        Altimeter setting in inches of mercury
        """
        return self._value("altimeter")
    @property
    def pressure_hpa(self):
        if self.pressure is None:
            return None
        return conversion.convert(self.pressure, "inHg", "hPa", "pressure")

    ### Repeatable groups ###
    @property
    def weather_conditions(self):
        return self._list("weather")
    @property
    def sky_conditions(self):
        return self._list("sky_conditions")
    @property
    def runway_visual_ranges(self):
        return self._list("runway_visual_range")
    @property
    def obscurations(self):
        return self._list("obscurations")
    @property
    def is_no_significant_change(self):
        return self._data["no_significant_change"]

    def _value(self, key):
        data = self._data[key]
        return None if data is None else data["value"]
    def _list(self, key):
        return tuple(copy.deepcopy(x) for x in self._data[key])
    def _round(self, val, digits):
        if val is None:
            return None
        return round(val, digits)

    ### Output ###
    def to_dict(self):
        data = copy.deepcopy(self._data)
        for key, value in data.items():
            if isinstance(value, tuple):
                data[key] = list(value)
        data["raw_text"] = self.raw_text
        return data
    def toJSON(self):
        return json.dumps(self.to_dict(), cls=ObsEncoder)

    def __repr__(self):
        return "Metar({})".format(self.raw_text)
    def __str__(self):
        return self.__repr__()
