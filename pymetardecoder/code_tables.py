################################################################################
# pymetardecoder/code_tables.py
#
# Code table base classes for pymetardecoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import re
import pymetardecoder
################################################################################
# BASE CLASSES
################################################################################
class CodeTable(object):
    """
    Base class for code table object
    """
    def decode(self, value, **kwargs):
        """
        Decodes raw value into observation value(s)

        :raises: pymetardecoder.InvalidCode if value is not in the table
        """
        try:
            return self._decode(value, **kwargs)
        except (KeyError, ValueError, IndexError) as e:
            raise pymetardecoder.InvalidCode(value, "code table {}".format(self._TABLE)) from e
    def _decode(self, raw, **kwargs):
        """
        Actual decode function. Implement in subclass
        """
        raise NotImplementedError("_decode needs to be implemented for {}".format(type(self).__name__))
class CodeTableLookup(CodeTable):
    """
    Code table for looking up the meaning of fixed codes

    _VALUES is a list of (code, value) pairs. The order of the list is the
    order in which codes are tried when matching the start of a group
    """
    _VALUES = []
    def _decode(self, code):
        for c, v in self._VALUES:
            if c == code:
                return v
        raise KeyError(code)
    def match(self, group, pos=0):
        """
        Finds the first code of the table that group contains at position pos

        :param string group: Group to check
        :param int pos: Position to check from
        :returns: (code, value), or (None, None) if no code matches
        :rtype: tuple
        """
        for c, v in self._VALUES:
            if group.startswith(c, pos):
                return (c, v)
        return (None, None)
    @classmethod
    def codes(cls):
        """
        Returns the codes of the table, in matching order
        """
        return [c for c, v in cls._VALUES]
    @classmethod
    def regexp(cls):
        """
        Returns a regular expression matching any of the codes of the table
        """
        return "|".join(re.escape(c) for c in cls.codes())
