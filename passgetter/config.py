#!/usr/bin/env python3

import os, configparser
from passgetter.kdf import DEFAULTS
from passgetter.errors import UnsupportedKdf, InvalidKdfOption

def _defaults(app):
  defaults = {app: {'verbose': 'no',
                    'kdf': 'pbkdf2',
                    'output': 'hex',
                    'alphabet': '',
                    'wordlist': ''}}
  for kdf, options in DEFAULTS.items():
    defaults[kdf] = {k: str(v) for k, v in options.items()}
  return defaults

def getcfg(app):
  config = configparser.ConfigParser()
  config.read_dict(_defaults(app))
  # read global cfg
  config.read('/etc/%s/config' % app)
  # update with per-user configs
  config.read(os.path.expanduser("~/.%src" % app))
  config.read(os.path.expanduser("~/.config/%s/config" % app))
  # over-ride with local directory config
  config.read(os.path.expanduser("%s.cfg" % app))
  return config

def kdf_options(cfg, kdf):
  """Options for derive_key() from the section of cfg named after kdf."""
  if kdf not in DEFAULTS:
    raise UnsupportedKdf(kdf)
  options = {}
  for k, v in cfg[kdf].items():
    if k not in DEFAULTS[kdf]:
      continue
    if k == 'digest':
      options[k] = v
      continue
    try:
      options[k] = int(v, 0)
    except ValueError:
      raise InvalidKdfOption(k, v, "must be an integer") from None
  return options

if __name__ == '__main__':
  import sys
  getcfg('passgetter').write(sys.stdout)
