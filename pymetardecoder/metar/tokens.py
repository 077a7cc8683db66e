################################################################################
# pymetardecoder/metar/tokens.py
#
# Splitting of METAR messages into groups
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import pymetardecoder

# Maximum number of groups accepted in a single message
MAX_TOKENS = 256
################################################################################
# FUNCTIONS
################################################################################
def tokenize(message, max_tokens=MAX_TOKENS):
    """
    Splits a message into groups on runs of whitespace

    :param string message: Message to split
    :param int max_tokens: Maximum number of groups allowed
    :returns: List of groups
    :rtype: list
    :raises: pymetardecoder.InputError if there are no groups or too many
    """
    if not isinstance(message, str):
        raise pymetardecoder.InputError("no METAR data", raw=message)
    tokens = message.split()
    if len(tokens) == 0:
        raise pymetardecoder.InputError("empty METAR data", raw=message)
    if max_tokens is not None and len(tokens) > max_tokens:
        raise pymetardecoder.InputError(
            "message has {} groups, maximum is {}".format(len(tokens), max_tokens),
            raw=message
        )
    return tokens
################################################################################
# CLASSES
################################################################################
class Cursor(object):
    """
    Forward-only position over a list of groups. Moving past the last group
    is allowed; from then on there is no current group
    """
    def __init__(self, tokens):
        self._tokens = list(tokens)
        self.position = 0
    def current(self):
        return self.peek(0)
    def peek(self, offset=1):
        pos = self.position + offset
        if 0 <= pos < len(self._tokens):
            return self._tokens[pos]
        return None
    def advance(self, count=1):
        self.position = min(self.position + count, len(self._tokens))
    def exhausted(self):
        return self.position >= len(self._tokens)
    def __repr__(self):
        return "Cursor({}/{}: {})".format(self.position, len(self._tokens), self.current())
