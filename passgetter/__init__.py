from passgetter.kdf import derive_key
from passgetter.bin2pass import base_key, base_words, pass2bin, load_wordlist
from passgetter.errors import (PassgetterError, UnsupportedKdf, UnsupportedKeyLength,
                               InvalidKdfOption, InvalidBase, MissingAlphabet,
                               AlphabetTooShort, InvalidInputLength, InvalidSymbol)
