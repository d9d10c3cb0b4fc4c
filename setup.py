#!/usr/bin/env python
#
# Copyright (c) 2026 PyEndian Development Team
#
# This software is distributed under the terms of the MIT License.
#

import os
from setuptools import setup

__version__ = None
VERSION_FILE = os.path.join(os.path.dirname(__file__), 'pyendian', '_version.py')
exec(open(VERSION_FILE).read())         # Adds __version__ to globals

with open('README.md', 'r') as fh:
    long_description = fh.read()

args = dict(
    name='pyendian',
    version=__version__,
    description='Fixed-width packing of integers, floats and rationals with explicit byte order.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=[
        'pyendian',
        'pyendian.native',
    ],
    python_requires='>=3.9',
    install_requires=[
        'numpy >= 1.22',
    ],
    extras_require={
        'test': [
            'pytest ~= 7.1',
            'coverage ~= 6.3',
        ],
    },
    author='PyEndian Development Team',
    license='MIT',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    keywords='endianness byte-order binary serialization struct'
)

setup(**args)
