#!/usr/bin/env python

from setuptools import setup

setup(name='chordsense',
      version='1.0',
      description='A python library for naming chords from sets of MIDI notes, with jazz-aware enharmonic spelling',
      install_requires=['numpy'],
      extras_require={
        'test': [ 'pytest' ]
      },
      package_dir = {'chordsense': 'src'},
      packages = ['chordsense', 'chordsense.config', 'chordsense.test'],
     )
