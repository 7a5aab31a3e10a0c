"""Exceptions raised by passgetter.

All of them are ValueErrors carrying the offending parameter, so callers
that only care about bad input can keep catching ValueError.
"""

class PassgetterError(ValueError):
    pass

class UnsupportedKdf(PassgetterError):
    def __init__(self, kdf):
        self.kdf = kdf
        super().__init__("%s is not implemented." % (kdf,))

class UnsupportedKeyLength(PassgetterError):
    def __init__(self, key_len, low, high):
        self.key_len = key_len
        super().__init__("key length %s outside of %d-%d bytes." % (key_len, low, high))

class InvalidKdfOption(PassgetterError):
    def __init__(self, option, value, reason):
        self.option = option
        self.value = value
        super().__init__("invalid %s %r: %s" % (option, value, reason))

class InvalidBase(PassgetterError):
    def __init__(self, base):
        self.base = base
        super().__init__("base must be at least 2, not %s." % (base,))

class MissingAlphabet(PassgetterError):
    def __init__(self, base, msg=None):
        self.base = base
        super().__init__(msg or "base %s has no built-in alphabet, supply one." % (base,))

class AlphabetTooShort(MissingAlphabet):
    def __init__(self, base, length):
        self.length = length
        super().__init__(base, "alphabet of %d symbols is too short for base %s." % (length, base))

class InvalidInputLength(PassgetterError):
    def __init__(self, length, multiple=4):
        self.length = length
        super().__init__("input length %d is not a multiple of %d." % (length, multiple))

class InvalidSymbol(PassgetterError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__("symbol %r is not in the alphabet." % (symbol,))
