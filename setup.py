#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from pathlib import Path

from setuptools import find_packages, setup

# XXX: structcodec/__init__.py imports the dependencies, so the version is read without importing the package
version_ns: dict = {}
exec((Path(__file__).parent / 'structcodec' / 'version.py').read_text(), version_ns)

setup(
    name='structcodec',
    version=version_ns['__version__'],
    description='Compositional binary serialization derived from type annotations',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(include=('structcodec', 'structcodec.*')),
    package_data={
        'structcodec.conf': ['*.yml'],
    },
    install_requires=[
        'pydantic>=2.0',
        'pyyaml',
        'structlog',
        'typing_extensions>=4.10',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
