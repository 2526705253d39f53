#!/usr/bin/env python
#
# Any copyright is dedicated to the Public Domain.
# http://creativecommons.org/publicdomain/zero/1.0/

from setuptools import setup

setup(name='hockeyapp-deploy',
      version='1.0',
      description='Upload Android builds to HockeyApp from a build pipeline',
      packages=['hockeydeploy'],
      python_requires='>=3.6',
      install_requires=['requests'],
      extras_require={
          'test': ['pytest'],
      },
      entry_points={
          'console_scripts': [
              'hockeyapp-deploy = hockeydeploy.deploy:main'
          ]
      }
     )
