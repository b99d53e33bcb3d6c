#!/usr/bin/env python3

from __future__ import annotations

import sys

if sys.version_info < (3, 10):
    sys.exit('emojitable needs Python 3.10+')

import re
from pathlib import Path

from setuptools import find_packages
from setuptools import setup

REPO_DIR = Path(__file__).resolve().parent
INIT = REPO_DIR / 'emojitable' / '__init__.py'

VERSION_RX = r'__version__ = "(\d+\.\d+\.\d+)"'


def get_version() -> str:
    match = re.search(VERSION_RX, INIT.read_text(encoding='utf8'))
    if match is None:
        sys.exit('Unable to find current version')
    return match[1]


setup(
    name='emojitable',
    version=get_version(),
    description='Builds a static emoji lookup table from the Unicode '
                'emoji registry and the gemoji alias catalog',
    license='GPL-3.0-only',
    python_requires='>=3.10',
    packages=find_packages(include=['emojitable', 'emojitable.*']),
    install_requires=[
        'packaging',
        'requests>=2.25',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'emojitable = emojitable.main:main',
        ],
    },
)
