################################################################################
# pymetardecoder/tests/test_report.py
#
# Unit tests for the decoded report, tokenizer and conversions. Requires pytest
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pytest
from pymetardecoder import conversion, InputError
from pymetardecoder.metar.report import Metar
from pymetardecoder.metar.tokens import Cursor, tokenize
################################################################################
# CLASSES
################################################################################
class TestVisibility:
    """
    Visibility is stored in one unit only and converted on the way out
    """
    def test_miles(self):
        report = Metar("x")
        report.set_visibility_miles(2)
        assert report.visibility_miles == 2
        assert report.visibility_kilometers == pytest.approx(2 * 1.609344)
        assert report.visibility_meters == pytest.approx(3218.688)
    def test_kilometers(self):
        report = Metar("x")
        report.set_visibility_kilometers(10)
        assert report.visibility_kilometers == 10
        assert report.visibility_miles == pytest.approx(10 / 1.609344)
        assert report.visibility_meters == pytest.approx(10000)
    def test_last_unit_wins(self):
        report = Metar("x")
        report.set_visibility_kilometers(10)
        report.set_visibility_miles(3, less_than=True)
        assert report.to_dict()["visibility"] == { "value": 3, "unit": "SM", "less_than": True }
        assert report.visibility_miles == 3
        assert report.visibility_less_than
    def test_cavok(self):
        report = Metar("x")
        report.set_cavok()
        assert report.is_cavok
        assert report.visibility_kilometers == 10
    def test_not_reported(self):
        report = Metar("x")
        assert report.visibility_miles is None
        assert report.visibility_kilometers is None
        assert report.visibility_meters is None
        assert not report.visibility_less_than
class TestTemperature:
    def test_most_precise_fallback(self):
        report = Metar("x")
        report.set("air_temperature", { "value": 13, "unit": "Cel" })
        report.set("dewpoint_temperature", { "value": 11, "unit": "Cel" })
        assert report.temperature_most_precise == 13
        assert report.dew_point_most_precise == 11
        report.set("air_temperature_precise", { "value": 12.8, "unit": "Cel" })
        report.set("dewpoint_temperature_precise", { "value": 10.6, "unit": "Cel" })
        assert report.temperature_most_precise == 12.8
        assert report.dew_point_most_precise == 10.6
        assert report.temperature_most_precise_fahrenheit == 55.0
        assert report.dew_point_most_precise_fahrenheit == 51.1
    def test_not_reported(self):
        report = Metar("x")
        assert report.temperature_most_precise is None
        assert report.temperature_fahrenheit is None
class TestRecord:
    def test_defaults(self):
        report = Metar("KCNO")
        assert report.report_modifier == "unspecified"
        assert report.weather_conditions == ()
        assert not report.is_cavok
        assert not report.is_no_significant_change
        assert not report.wind_direction_is_variable
    def test_unknown_key(self):
        with pytest.raises(KeyError):
            Metar("x").set("remarks", "AO2")
    def test_freeze(self):
        report = Metar("x")
        report.append("weather", { "intensity": None, "descriptor": None, "phenomena": "rain" })
        report.freeze()
        with pytest.raises(AttributeError):
            report.append("weather", { "intensity": None, "descriptor": None, "phenomena": "snow" })
        with pytest.raises(AttributeError):
            report.set_cavok()
        assert len(report.weather_conditions) == 1
        assert report.to_dict()["weather"] == [{ "intensity": None, "descriptor": None, "phenomena": "rain" }]
    def test_lists_are_copies(self):
        report = Metar("x")
        report.append("sky_conditions", { "cover": "clear_automated", "height": None, "modifier": None })
        report.freeze()
        report.sky_conditions[0]["cover"] = "overcast"
        report.to_dict()["sky_conditions"].append(None)
        assert report.sky_conditions == ({ "cover": "clear_automated", "height": None, "modifier": None },)
    def test_repr(self):
        assert repr(Metar("KCNO 060653Z")) == "Metar(KCNO 060653Z)"
class TestTokens:
    def test_whitespace(self):
        assert tokenize("  KCNO\t060653Z \n 32004KT  ") == ["KCNO", "060653Z", "32004KT"]
    @pytest.mark.parametrize("message", [None, "", " \t\n", 42])
    def test_no_groups(self, message):
        with pytest.raises(InputError):
            tokenize(message)
    def test_max_tokens(self):
        assert len(tokenize("A B C", max_tokens=3)) == 3
        with pytest.raises(InputError):
            tokenize("A B C D", max_tokens=3)
    def test_cursor(self):
        groups = Cursor(["KCNO", "060653Z"])
        assert groups.current() == "KCNO"
        assert groups.peek() == "060653Z"
        assert groups.peek(2) is None
        groups.advance()
        assert groups.current() == "060653Z"
        assert not groups.exhausted()
        groups.advance(5)
        assert groups.exhausted()
        assert groups.current() is None
        assert groups.position == 2
class TestConversion:
    @pytest.mark.parametrize("val,unit_from,unit_to,unit_type,expected", [
        (10, "SM", "km", "length", 16.09344),
        (1000, "m", "km", "length", 1),
        (10, "KT", "m/s", "speed", 5.144444),
        (10, "m/s", "mph", "speed", 22.369363),
        (29.92, "inHg", "hPa", "pressure", 1013.207),
        (100, "Cel", "degF", "temperature", 212),
        (32, "degF", "Cel", "temperature", 0),
        (0, "Cel", "K", "temperature", 273.15)
    ])
    def test_convert(self, val, unit_from, unit_to, unit_type, expected):
        assert conversion.convert(val, unit_from, unit_to, unit_type) == pytest.approx(expected, abs=1e-3)
    def test_unknown_unit(self):
        with pytest.raises(conversion.ConversionError):
            conversion.convert(1, "SM", "furlong", "length")
        with pytest.raises(conversion.ConversionError):
            conversion.convert(1, "K", "Cel", "temperature")
        with pytest.raises(conversion.ConversionError):
            conversion.convert(10, "KT", "km/h", "speed")
    def test_unknown_type(self):
        with pytest.raises(ValueError):
            conversion.convert(1, "a", "b", "luminosity")
