#!/usr/bin/env python3

import sys, base64, struct
from itertools import chain
import base91
from zmq.utils import z85

from passgetter.errors import PassgetterError, InvalidBase, MissingAlphabet, AlphabetTooShort, InvalidInputLength, InvalidSymbol

sets = {
    # digits
    'd': tuple(chr(x) for x in range(48,58)),
    # lower-case
    'l': tuple(chr(x) for x in range(97,123)),
    # upper-case
    'u': tuple(chr(x) for x in range(65,91))}

# [0-9a-zA-Z], truncated to the base for bases up to 62
allchars = ''.join(chain(sets['d'], sets['l'], sets['u']))

def bin2pass(raw, chars):
    """Render raw as one big-endian number written with the symbols in chars.

    Leading zero bytes do not show up in the result, a key that starts
    with them gives a shorter password.
    """
    v = int.from_bytes(raw, 'big')
    base = len(chars)
    result = []
    while True:
        v, idx = divmod(v, base)
        result.append(chars[idx])
        if v == 0: break
    return ''.join(reversed(result))

def _alphabet(base, chars):
    if base < 2:
        raise InvalidBase(base)
    if chars:
        if len(chars) < base:
            raise AlphabetTooShort(base, len(chars))
        return chars[:base]
    if base <= len(allchars):
        return allchars[:base]
    return None

def base_key(key, base, chars=None):
    """Convert the binary key to a string in base.

    64 is url safe base64 (RFC 4648, with padding), 85 is Z85 (ZeroMQ
    Base-85, key length must be a multiple of 4), 91 is basE91. These
    three work directly on the bytes. Any other base treats the key as a
    big-endian number: bases up to 62 are mapped on [0-9a-zA-Z], others
    need chars, a sequence of at least base symbols. Supplying chars
    always selects the numeric conversion.

    >>> key = bytes.fromhex('5827ca0d7e19f647b55cf706d71b8e69166f10c80969fd2437486a815f173228')
    >>> base_key(key, 36)
    '273jl05axr9r7pdeix720rj3fciuv0jhueyqp6dyia1sp7rs4o'
    """
    symbols = _alphabet(base, chars)
    if symbols is not None:
        return bin2pass(key, symbols)
    if base == 64:
        return base64.urlsafe_b64encode(key).decode()
    if base == 85:
        if len(key) % 4:
            raise InvalidInputLength(len(key))
        return z85.encode(key).decode()
    if base == 91:
        return base91.encode(key)
    raise MissingAlphabet(base)

def pass2bin(string, base, chars=None, size=None):
    """Inverse of base_key().

    Numeric conversions cannot tell how many leading zero bytes the key
    had, pass size to get them back. Only alphabets of single characters
    can be decoded, a concatenation of words is ambiguous.
    """
    symbols = _alphabet(base, chars)
    if symbols is None:
        if base == 64:
            return base64.urlsafe_b64decode(string)
        if base == 85:
            if len(string) % 5:
                raise InvalidInputLength(len(string), 5)
            try:
                return z85.decode(string.encode('ascii'))
            except UnicodeEncodeError as e:
                raise InvalidSymbol(string[e.start]) from None
            except KeyError as e:
                raise InvalidSymbol(chr(e.args[0])) from None
            except struct.error:
                # a group of 5 above 2**32-1
                raise ValueError("%r is not valid Z85" % (string,)) from None
        if base == 91:
            return bytes(base91.decode(string))
        raise MissingAlphabet(base)

    index = {}
    for i, s in enumerate(symbols):
        if len(s) != 1:
            raise InvalidSymbol(s)
        index.setdefault(s, i)
    if not string:
        raise InvalidSymbol(string)
    v = 0
    for c in string:
        try:
            v = v * base + index[c]
        except KeyError:
            raise InvalidSymbol(c) from None
    if size is None:
        size = max(1, (v.bit_length() + 7) // 8)
    try:
        return v.to_bytes(size, 'big')
    except OverflowError:
        raise ValueError("%r does not fit in %d bytes" % (string, size)) from None

def base_words(key, words):
    """Spell key with words, a list of at least two distinct strings.

    Every digit of the key in base len(words) picks one word, the words
    are joined without a separator. Capitalize the list beforehand to get
    readable output, see load_wordlist(). Duplicates are not detected.
    """
    if len(words) < 2:
        raise InvalidBase(len(words))
    return base_key(key, len(words), list(words))

def load_wordlist(path, capitalize=True):
    """Read one word per line.

    Empty lines are kept as empty words, every line counts towards the
    base so the same file always spells the same password.
    """
    with open(path, encoding='utf8') as fd:
        words = [line.rstrip('\r\n') for line in fd]
    if capitalize:
        words = [w[:1].upper() + w[1:] for w in words]
    return words

def usage():
    print("usage: %s <base> [<alphabet>] <binary\tconvert binary key to <base> using optional <alphabet>" % sys.argv[0])
    sys.exit(0)

def main():
  if len(sys.argv) not in (2,3) or sys.argv[1] in ('-h', '--help'):
    usage()

  try:
    base = int(sys.argv[1])
  except ValueError:
    usage()
  chars = sys.argv[2] if len(sys.argv) == 3 else None

  raw = sys.stdin.buffer.read()
  try:
    print(base_key(raw, base, chars))
  except PassgetterError as e:
    print("error: %s" % e, file=sys.stderr)
    sys.exit(1)

if __name__ == '__main__':
  main()
