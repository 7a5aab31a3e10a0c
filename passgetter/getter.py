#!/usr/bin/env python3

import sys, binascii
from SecureString import clearmem

from passgetter import bin2pass
from passgetter.kdf import derive_key, KDFS
from passgetter.config import getcfg, kdf_options
from passgetter.errors import PassgetterError

cfg = getcfg('passgetter')

verbose = cfg['passgetter'].getboolean('verbose')

def render(key, output, alphabet=None, wordlist=None):
  """Turn the binary key into the requested output form.

  output is 'hex', 'raw', 'words' or a base number (as int or text).
  """
  if output == 'hex':
    return binascii.hexlify(key).decode()
  if output == 'raw':
    # a copy, the key itself gets wiped
    return bytearray(key)
  if output == 'words':
    if not wordlist:
      raise ValueError("error: no wordlist configured.")
    return bin2pass.base_words(key, bin2pass.load_wordlist(wordlist))
  try:
    base = int(output)
  except ValueError:
    raise ValueError("error: unknown output %r." % (output,)) from None
  return bin2pass.base_key(key, base, alphabet or None)

def getpass(pwd, salt, kdf=None, output=None, alphabet=None):
  """Derive the key of pwd for salt and render it, using cfg for defaults."""
  section = cfg['passgetter']
  kdf = kdf or section['kdf']
  output = output or section['output']
  if alphabet is None:
    alphabet = section['alphabet']
  options = kdf_options(cfg, kdf)
  if verbose:
    print('kdf: {} {!r}'.format(kdf, options), file=sys.stderr)
    print('salt: {!r} output: {}'.format(salt, output), file=sys.stderr)
  key = derive_key(pwd, salt, kdf, options, False)
  try:
    return render(key, output, alphabet, section['wordlist'])
  finally:
    clearmem(key)

def main():
  def usage():
    print("usage: %s [%s] <salt> [hex|raw|words|<base> [<alphabet>]] <passphrase" % (sys.argv[0], '|'.join(sorted(KDFS))))
    sys.exit(1)

  args = sys.argv[1:]
  if not args or args[0] in ('-h', '--help'): usage()

  kdf = None
  if args[0] in KDFS:
    kdf = args.pop(0)
  if len(args) not in (1,2,3): usage()
  salt = args[0]
  output = args[1] if len(args) > 1 else None
  alphabet = args[2] if len(args) > 2 else None

  # mutable, so it can be wiped in place
  pwd = bytearray(sys.stdin.buffer.read())
  while pwd[-1:] in (b'\r', b'\n'):
    del pwd[-1]
  try:
    password = getpass(pwd, salt, kdf, output, alphabet)
  except PassgetterError as e:
    print("error: %s" % e, file=sys.stderr)
    sys.exit(1)
  except (ValueError, OSError) as e:
    print(e, file=sys.stderr)
    sys.exit(1)
  finally:
    pwd[:] = bytes(len(pwd))

  if isinstance(password, bytearray):
    sys.stdout.buffer.write(password)
    sys.stdout.buffer.flush()
  else:
    print(password)

if __name__ == '__main__':
  main()
