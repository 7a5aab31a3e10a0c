#!/usr/bin/env python

import os
from setuptools import setup


# Utility function to read the README file.
# Used for the long_description.
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(name = 'passgetter',
       version = '0.1.0',
       description = 'Deterministic site passwords from a master passphrase',
       license = "GPLv3",
       long_description=read('README.md'),
       long_description_content_type='text/markdown',
       packages = ['passgetter'],
       python_requires = '>=3.6',
       install_requires = ("pysodium", "SecureString", "pyzmq", "base91",),
       extras_require = {'test': ("pytest",)},
       classifiers = ["Development Status :: 4 - Beta",
                      "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
                      "Topic :: Security :: Cryptography",
                      "Topic :: Security",
                   ],
       entry_points = {
           'console_scripts': [
               'passgetter = passgetter.getter:main',
               'bin2pass = passgetter.bin2pass:main',
           ],
       },
)
