################################################################################
# pymetardecoder/metar/__init__.py
#
# METAR/SPECI decoder module for pymetardecoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import re, logging
from datetime import datetime, timezone
import pymetardecoder
from . import observations as obs
from .report import Metar
from .tokens import Cursor, tokenize, MAX_TOKENS

REMARKS = "RMK"
NO_SIGNIFICANT_CHANGE = "NOSIG"
################################################################################
# REPORT CLASSES
################################################################################
class METAR(pymetardecoder.Report):
    """
    METAR/SPECI decoder

    Groups are decoded in the order they appear in the report. Each group is
    optional apart from the station identifier; a group that is not found is
    left unset and decoding carries on with the next group.

    :param datetime reference_time: Time used to work out the month and year
        of the report. Defaults to the current time when decode is called
    :param int max_tokens: Maximum number of groups in a message
    """
    def __init__(self, reference_time=None, max_tokens=MAX_TOKENS):
        self.reference_time = reference_time
        self.max_tokens = max_tokens
    def _decode(self, message):
        """
        Decodes the METAR and returns a Metar report with the information
        """
        groups = Cursor(tokenize(message, max_tokens=self.max_tokens))
        report = Metar(message)

        ### BODY ###
        self._decode_station(groups, report)
        self._decode_time(groups, report, message)
        self._decode_report_modifier(groups, report)
        self._decode_wind(groups, report)
        self._decode_visibility(groups, report)
        self._decode_runway_visual_range(groups, report)
        self._decode_weather(groups, report)
        self._decode_sky_conditions(groups, report)
        self._decode_temperature(groups, report)
        self._decode_altimeter(groups, report)

        ### REMARKS ###
        if groups.current() == REMARKS:
            groups.advance()
        self._decode_remarks(groups, report)

        report.freeze()
        return report

    # Functions to decode individual groups
    def _decode_station(self, groups, report):
        """
        Station identifier (CCCC). Always the first group
        """
        report.set("station_id", groups.current())
        groups.advance()
    def _decode_time(self, groups, report, message):
        """
        Day and time of observation (YYGGggZ)
        """
        group = groups.current()
        if not obs.ObservationTime().is_valid(group, raise_exception=False):
            return
        try:
            obs_time = obs.ObservationTime().decode(group)
            report.set("observation_time", self._resolve_time(obs_time))
        except (pymetardecoder.InvalidGroup, ValueError) as e:
            raise pymetardecoder.TokenError(group, raw=message) from e
        groups.advance()
    def _resolve_time(self, obs_time):
        """
        Turns day, hour and minute into a full UTC time. Year and month are
        taken from the reference time; a day later than the reference day
        belongs to the previous month
        """
        now = self.reference_time
        if now is None:
            now = datetime.now(timezone.utc)
        (year, month) = (now.year, now.month)
        day = obs_time["day"]["value"]
        if day > now.day:
            month -= 1
            if month == 0:
                (year, month) = (year - 1, 12)
        return datetime(
            year, month, day,
            obs_time["hour"]["value"], obs_time["minute"]["value"],
            tzinfo=timezone.utc
        )
    def _decode_report_modifier(self, groups, report):
        """
        Report modifier (AUTO/COR)
        """
        group = groups.current()
        if obs.ReportModifier().is_valid(group, raise_exception=False):
            report.set("report_modifier", obs.ReportModifier().decode(group)["value"])
            groups.advance()
    def _decode_wind(self, groups, report):
        """
        Wind (dddff(f)Gfmfm(fm)KT) and variable wind direction (dndndnVdxdxdx)
        """
        group = groups.current()
        if not obs.SurfaceWind().is_valid(group, raise_exception=False):
            return
        wind = self._decode_group(obs.SurfaceWind(), group)
        groups.advance()

        # Variable wind direction
        group = groups.current()
        if obs.VariableWindDirection().is_valid(group, raise_exception=False):
            variable_direction = self._decode_group(obs.VariableWindDirection(), group)
            if wind is not None and variable_direction is not None:
                wind["variable"] = True
                wind["variable_direction"] = variable_direction
            groups.advance()
        report.set("wind", wind)
    def _decode_visibility(self, groups, report):
        """
        Prevailing visibility. May use two groups for statute miles with a
        fraction (e.g. 1 1/2SM)
        """
        (group, next_group) = (groups.current(), groups.peek())
        if group is None:
            return

        # Visibility not available (e.g. //// from an automated station)
        if not obs.Visibility().is_available(group):
            groups.advance()
            return
        if group in ["CAVOK", "9999"] or group.endswith(("SM", "KM")):
            count = 1
        elif next_group is not None and next_group.endswith(("SM", "KM")) and re.match(r"^M?\d+$", group):
            group = "{} {}".format(group, next_group)
            count = 2
        elif re.match(r"^M?\d+$", group):
            count = 1
        else:
            return

        visibility = self._decode_group(obs.Visibility(), group)
        groups.advance(count)
        if visibility is None:
            return
        if visibility["cavok"]:
            report.set_cavok()
        elif visibility["unit"] == "SM":
            report.set_visibility_miles(visibility["value"], less_than=visibility["less_than"])
        elif visibility["unit"] == "km":
            report.set_visibility_kilometers(visibility["value"], less_than=visibility["less_than"])
        else:
            report.set_visibility_meters(visibility["value"], less_than=visibility["less_than"])
    def _decode_runway_visual_range(self, groups, report):
        """
        Runway visual range (RDRDR/VRVRVRVRFT), repeatable. The digit after
        the R tells it apart from rain (RA)
        """
        self._decode_repeatable(groups, report, obs.RunwayVisualRange, "runway_visual_range")
    def _decode_weather(self, groups, report):
        """
        Present weather ((+/-/VC)DDPP), repeatable
        """
        self._decode_repeatable(groups, report, obs.Weather, "weather")
    def _decode_sky_conditions(self, groups, report):
        """
        Sky condition (NsNsNshshshs, VVhshshs, SKC/CLR/NSC), repeatable
        """
        self._decode_repeatable(groups, report, obs.SkyCondition, "sky_conditions")
    def _decode_temperature(self, groups, report):
        """
        Temperature and dew point ((M)T'T'/(M)T'dT'd)
        """
        group = groups.current()
        if not obs.TemperatureDewPoint().is_valid(group, raise_exception=False):
            return
        temperature = self._decode_group(obs.TemperatureDewPoint(), group)
        if temperature is not None:
            report.set("air_temperature", temperature["air_temperature"])
            report.set("dewpoint_temperature", temperature["dewpoint_temperature"])
        groups.advance()
    def _decode_altimeter(self, groups, report):
        """
        Altimeter setting (APhPhPhPh)
        """
        group = groups.current()
        if not obs.Altimeter().is_valid(group, raise_exception=False):
            return
        report.set("altimeter", self._decode_group(obs.Altimeter(), group))
        groups.advance()
    def _decode_remarks(self, groups, report):
        """
        Scans the rest of the message for hourly temperature (TsnT'T'T'snT'dT'dT'd),
        obscurations (w'w' NsNsNshshshs) and NOSIG. Other groups are skipped
        """
        while not groups.exhausted():
            group = groups.current()
            next_group = groups.peek()
            if obs.PreciseTemperature().is_valid(group, raise_exception=False):
                temperature = self._decode_group(obs.PreciseTemperature(), group)
                if temperature is not None:
                    report.set("air_temperature_precise", temperature["air_temperature"])
                    report.set("dewpoint_temperature_precise", temperature["dewpoint_temperature"])
            elif next_group is not None and obs.Obscuration().is_valid("{} {}".format(group, next_group), raise_exception=False):
                obscuration = self._decode_group(obs.Obscuration(), "{} {}".format(group, next_group))
                if obscuration is not None:
                    report.append("obscurations", obscuration)
                groups.advance()
            elif group == NO_SIGNIFICANT_CHANGE:
                report.set("no_significant_change", True)
            else:
                logging.debug("Skipping group {}".format(group))
            groups.advance()
    def _decode_repeatable(self, groups, report, observation, key):
        """
        Decodes groups for as long as they match the observation
        """
        while observation().is_valid(groups.current(), raise_exception=False):
            value = self._decode_group(observation(), groups.current())
            if value is not None:
                report.append(key, value)
            groups.advance()
    def _decode_group(self, observation, group):
        """
        Decodes a group that is not mandatory. If it cannot be decoded, a
        warning is logged and None is returned
        """
        try:
            return observation.decode(group)
        except pymetardecoder.InvalidGroup as e:
            logging.warning(str(e))
            return None
