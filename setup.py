#!/usr/bin/env python

from setuptools import setup

setup(name='modalis',
      version='1.0',
      description='A python library for spelling modal scales and deriving their diatonic chords and relative modes',
      install_requires=['numpy'],
      extras_require={
        'test': [ 'pytest' ],
      },
      packages=['modalis', 'modalis.config', 'modalis.test'],
      package_dir = {'modalis': 'src'}
     )
