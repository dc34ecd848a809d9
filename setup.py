#!/usr/bin/env python
"""Setuptools distribution file."""
import os
from setuptools import setup


def _get_here(fname):
    return os.path.join(os.path.dirname(__file__), fname)


def _get_long_description(fname, encoding='utf8'):
    return open(fname, 'r', encoding=encoding).read()


def _get_install_requires(fname):
    return [line.strip() for line in open(fname, 'r')
            if line.strip() and not line.startswith('#')]


setup(name='forbidden-bands',
      # keep in sync w/forbidden_bands/__init__.py manually for now, please!
      version='0.2.0',
      license='ISC',
      description="Fixed-length 8-bit strings and PETSCII to Unicode conversion",
      long_description=_get_long_description(fname=_get_here('README.rst')),
      packages=['forbidden_bands', 'forbidden_bands.encodings'],
      package_data={'': ['README.rst', 'requirements.txt'], },
      install_requires=_get_install_requires(_get_here('requirements.txt')),
      extras_require={'test': ['pytest']},
      python_requires='>=3.8',
      entry_points={
         'console_scripts': [
             'forbidden-bands-decode = forbidden_bands.cli:decode_main',
             'forbidden-bands-encode = forbidden_bands.cli:encode_main'
         ]},
      platforms='any',
      zip_safe=True,
      keywords=', '.join(('petscii', 'commodore', 'c64', 'c128', 'cbm',
                          'unicode', 'codec', 'charset', 'retro')),
      classifiers=['License :: OSI Approved :: ISC License (ISCL)',
                   'Programming Language :: Python :: 3',
                   'Intended Audience :: Developers',
                   'Development Status :: 4 - Beta',
                   'Topic :: Text Processing',
                   'Topic :: System :: Emulators',
                   ],
      )
