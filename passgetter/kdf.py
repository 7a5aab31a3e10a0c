"""Key derivation for passgetter

   derive_key() turns a master passphrase and a salt (usually the domain
   name of a site) into a fixed length key, either with PBKDF2-HMAC from
   hashlib or with scrypt from libsodium. The same input always gives the
   same key.
"""

import binascii, ctypes, hashlib
import pysodium

from passgetter.errors import UnsupportedKdf, UnsupportedKeyLength, InvalidKdfOption

# scrypt key_len range: 16 bytes (128 bits) - 512 bytes (4096 bits)
SCRYPT_MIN_KEY_LEN = 16
SCRYPT_MAX_KEY_LEN = 512

DEFAULTS = {
    'pbkdf2': {'iter': 40000, 'key_len': 32, 'digest': 'sha1'},
    # n, r, p as recommended by the scrypt author:
    # http://www.tarsnap.com/scrypt/scrypt-slides.pdf
    'scrypt': {'key_len': 32, 'n': 2**20, 'r': 8, 'p': 1},
}

def _bytes(s):
    if isinstance(s, str):
        return s.encode('utf8')
    return bytes(s)

def _positive(name, value):
    if not isinstance(value, int) or value < 1:
        raise InvalidKdfOption(name, value, "must be a positive integer")
    return value

def pbkdf2(pwd, salt, iter=None, key_len=None, keylen=None, digest=None):
    if None in (pwd, salt):
        raise ValueError("invalid parameter")
    defaults = DEFAULTS['pbkdf2']
    iter = _positive('iter', defaults['iter'] if iter is None else iter)
    # key_len over keylen, the latter is the name openssl uses
    if key_len is None:
        key_len = defaults['key_len'] if keylen is None else keylen
    key_len = _positive('key_len', key_len)
    # accept hashlib objects as well as names
    digest = getattr(digest, 'name', digest) or defaults['digest']
    try:
        return hashlib.pbkdf2_hmac(digest, _bytes(pwd), _bytes(salt), iter, key_len)
    except ValueError:
        raise InvalidKdfOption('digest', digest, "unsupported hash type") from None

def __check(code):
    if code != 0:
        raise ValueError("scrypt failed")

# int crypto_pwhash_scryptsalsa208sha256_ll(const uint8_t * passwd, size_t passwdlen,
#                                           const uint8_t * salt, size_t saltlen,
#                                           uint64_t N, uint32_t r, uint32_t p,
#                                           uint8_t * buf, size_t buflen)
def scrypt(pwd, salt, key_len=None, n=None, r=None, p=None):
    if None in (pwd, salt):
        raise ValueError("invalid parameter")
    defaults = DEFAULTS['scrypt']
    key_len = defaults['key_len'] if key_len is None else key_len
    if not isinstance(key_len, int) or not SCRYPT_MIN_KEY_LEN <= key_len <= SCRYPT_MAX_KEY_LEN:
        raise UnsupportedKeyLength(key_len, SCRYPT_MIN_KEY_LEN, SCRYPT_MAX_KEY_LEN)
    # general work factor, must be a power of 2
    n = _positive('n', defaults['n'] if n is None else n)
    if n < 2 or n & (n - 1):
        raise InvalidKdfOption('n', n, "must be a power of 2 greater than 1")
    # block size, fine-tunes the relative memory-cost
    r = _positive('r', defaults['r'] if r is None else r)
    # parallelization, fine-tunes the relative cpu-cost
    p = _positive('p', defaults['p'] if p is None else p)
    pwd, salt = _bytes(pwd), _bytes(salt)
    buf = ctypes.create_string_buffer(key_len)
    __check(pysodium.sodium.crypto_pwhash_scryptsalsa208sha256_ll(pwd, ctypes.c_size_t(len(pwd)),
                                                                  salt, ctypes.c_size_t(len(salt)),
                                                                  ctypes.c_uint64(n), ctypes.c_uint32(r), ctypes.c_uint32(p),
                                                                  buf, ctypes.c_size_t(key_len)))
    return buf.raw

KDFS = {
    'pbkdf2': pbkdf2,
    'scrypt': scrypt,
}

def derive_key(pwd, salt, kdf='pbkdf2', options=None, hexlify=True):
    """Derive a key from pwd and salt.

    kdf is 'pbkdf2' or 'scrypt', options may override any of the
    DEFAULTS of that kdf. Returns the key as lowercase hex unless hexlify
    is false, in which case the raw bytes are returned.

    >>> derive_key('pass', 'example.com')
    '34817086825b1b6bd4d841e9dee396eadbc0aa6fbc1dc05551294ad74d919e0a'
    """
    try:
        fn = KDFS[kdf]
    except (KeyError, TypeError):
        raise UnsupportedKdf(kdf) from None
    options = dict(options or {})
    unknown = set(options) - set(DEFAULTS[kdf]) - ({'keylen'} if kdf == 'pbkdf2' else set())
    if unknown:
        name = sorted(unknown)[0]
        raise InvalidKdfOption(name, options[name], "unknown %s option" % kdf)
    key = fn(pwd, salt, **options)
    if hexlify:
        return binascii.hexlify(key).decode()
    return key
