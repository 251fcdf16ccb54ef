# -*- coding: utf-8 -*-
#
#    LksLib - Python LKS Chain Network Library
#    PyPi Setup Tool
#    © 2024 - 2026 October - LksLib Developers
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

from setuptools import setup
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
version = open(os.path.join(here, 'lkslib', 'config', 'VERSION'), encoding='utf-8').read().strip()

# Get the long description from the relevant file
readmetxt = ''
try:
    with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
        readmetxt = f.read()
except IOError:
    pass

kwargs = {}

install_requires = []

kwargs['install_requires'] = install_requires

setup(
      name='lkslib',
      version=version,
      description='LKS Chain network definitions and lookup library',
      long_description=readmetxt,
      classifiers=[
            'Development Status :: 4 - Beta',
            'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',
            'Intended Audience :: Developers',
            'Natural Language :: English',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3',
            'Topic :: Software Development :: Libraries :: Python Modules',
      ],
      author='LksLib Developers',
      license='AGPL3',
      packages=['lkslib', 'lkslib.config'],
      package_data={'lkslib': ['config/VERSION', 'data/*.ini']},
      extras_require={'test': ['pytest']},
      test_suite='tests',
      include_package_data=True,
      keywords='lks cryptocurrency networks regtest testnet',
      zip_safe=False,
      **kwargs
)
