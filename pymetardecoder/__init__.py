################################################################################
# pymetardecoder/__init__.py
#
# Main __init__ script for pymetardecoder
#
# 2026-10-19:
#   * First version, exception classes and Report/Observation base classes
################################################################################
# IMPORTS
################################################################################
import json, re
from datetime import datetime
from . import conversion
################################################################################
# EXCEPTION CLASSES
################################################################################
class DecodeError(Exception):
    """
    Fatal decoding error. Carries the original message in raw
    """
    def __init__(self, msg, raw=None):
        self.msg = msg
        self.raw = raw
        super().__init__(self.msg)
    def __str__(self):
        result = self.msg
        if self.__cause__ is not None:
            result = "{} ({})".format(result, self.__cause__)
        return result
class InputError(DecodeError):
    """
    Message is empty or cannot be split into groups
    """
    def __init__(self, msg, raw=None):
        super().__init__("input error: {}".format(msg), raw=raw)
class TokenError(DecodeError):
    """
    A mandatory group could not be decoded
    """
    def __init__(self, group, raw=None):
        self.group = group
        super().__init__("unable to decode mandatory group {}".format(group), raw=raw)
class InvalidCode(Exception):
    def __init__(self, val, desc):
        self.msg = "{} is not a valid code for {}".format(val, desc)
        super().__init__(self.msg)
class InvalidGroup(Exception):
    def __init__(self, group):
        self.group = group
        self.msg = "{} is not a valid group".format(group)
        super().__init__(self.msg)
################################################################################
# BASE CLASSES
################################################################################
class Report(object):
    """
    Base class for a meteorological report
    """
    def decode(self, message):
        """
        Decode function
        """
        try:
            return self._decode(message)
        except DecodeError:
            raise
        except Exception as e:
            raise DecodeError("unable to decode {}".format(message), raw=message) from e
    def _decode(self, message):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented in {} subclass".format(type(self).__name__))
class Observation(object):
    """
    Base class for an Observation, i.e. a single group (or part of a group)
    of a report

    Subclasses describe themselves with class attributes:

    * _VALID_REGEXP / _VALID_VALUES / _VALID_RANGE - shape of a valid group
    * _UNIT - unit of the decoded value
    * _CODE_TABLE - code table used to decode the value
    * _COMPONENTS - list of (name, offset, length, Observation class)

    :param string null_char: Character used to mark a value as not available
    """
    def __init__(self, null_char="/"):
        self.null_char = null_char
    def decode(self, raw, **kwargs):
        """
        Decodes raw value into observation value(s)

        :returns: Decoded value(s), or None if the value is not available
        :raises: InvalidGroup if the value has the right shape but cannot be decoded
        """
        try:
            # Check if available
            if not self.is_available(raw):
                return None

            # Check if valid
            self.is_valid(raw)

            # Decode
            return self._decode(raw, **kwargs)
        except InvalidGroup:
            raise
        except (InvalidCode, ValueError, IndexError, ArithmeticError) as e:
            raise InvalidGroup(raw) from e
    def _decode(self, raw, **kwargs):
        """
        Actual decode function. Mostly implemented in subclasses
        """
        if not hasattr(self, "_COMPONENTS"):
            return self._decode_value(raw, **kwargs)
        else:
            retval = {}
            for x in self._COMPONENTS:
                retval[x[0]] = x[3]().decode(read_chars(raw, x[1], x[2]))
            return retval
    def is_available(self, value, char=None):
        """
        Checks if the value is available

        :param string value: Value to check
        :param string char: Character to use to determine if value is available
        :returns: False if value is missing or only contains the null character, otherwise True
        :rtype: boolean
        """
        if value is None:
            return False
        if char is None:
            char = self.null_char
        return not bool(value.count(char) == len(value))
    def is_valid(self, value, raise_exception=True):
        """
        Checks if the value is valid. Wrapper to _is_valid()

        :param string value: Value to check
        :param boolean raise_exception: If True, raises exception if not valid
        :returns: True if value is valid, False otherwise
        :rtype: boolean
        """
        valid = value is not None and self._is_valid(value)
        if not valid and raise_exception:
            raise InvalidCode(value, type(self).__name__)
        return valid
    def _is_valid(self, value):
        """
        Actual validity check

        :returns: True if value is valid, False otherwise
        :rtype: boolean
        """
        # If _VALID_VALUES present, use that to check
        if hasattr(self, "_VALID_VALUES"):
            return value in self._VALID_VALUES

        # If _VALID_RANGE present, check if value is in range
        if hasattr(self, "_VALID_RANGE"):
            if not re.match(r"^\d+$", value):
                return False
            return self._VALID_RANGE[0] <= int(value) <= self._VALID_RANGE[1]

        # If _VALID_REGEXP present, check value matches regexp
        if hasattr(self, "_VALID_REGEXP"):
            return bool(re.match(self._VALID_REGEXP, value))

        # If we have reached this point, we can't validate. Therefore, assume it's valid
        return True
    def _decode_value(self, val, **kwargs):
        # Get unit
        unit = kwargs.get("unit")
        if unit is None and hasattr(self, "_UNIT"):
            unit = self._UNIT

        # Get value from code table, otherwise convert to int
        if hasattr(self, "_CODE_TABLE"):
            out_val = self._CODE_TABLE().decode(val)
        else:
            out_val = int(val)

        # Perform post conversion
        out_val = self._decode_convert(out_val, **kwargs)

        # Create and return output
        data = { "value": out_val }
        if unit is not None:
            data["unit"] = unit
        return data
    def _decode_convert(self, val, **kwargs):
        return val

    def __repr__(self):
        return str(vars(self))
    def __str__(self):
        return self.__repr__()
class ObsEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, datetime):
            return o.isoformat()
        return o.__dict__
################################################################################
# FUNCTIONS
################################################################################
def char_at(group, pos):
    """
    Returns the character at a given position of a group

    :param string group: Group to read from
    :param int pos: Position of the character
    :returns: The character, or None if pos lies outside the group
    :rtype: string
    """
    if 0 <= pos < len(group):
        return group[pos]
    return None
def read_chars(group, start, length):
    """
    Reads a fixed number of characters from a group

    :param string group: Group to read from
    :param int start: Position of the first character
    :param int length: Number of characters to read
    :returns: The characters read
    :rtype: string
    :raises: IndexError if the group is too short
    """
    if start < 0 or start + length > len(group):
        raise IndexError("cannot read {} characters at position {} of {}".format(length, start, group))
    return group[start:start + length]
