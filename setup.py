#!/usr/bin/env python3

import os

from setuptools import find_packages, setup

package = "inflector"

about = {}
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, package, '__version__.py')) as f:
    exec(f.read(), about)

with open(os.path.join(here, 'requirements', 'default.txt')) as fd:
    requirements = fd.read().splitlines()

with open(os.path.join(here, 'requirements', 'test.txt')) as fd:
    test_requirements = fd.read().splitlines()

with open(os.path.join(here, 'README.md')) as fd:
    readme = fd.read()

setup(
    name=about['__title__'],
    description=about['__description__'],
    long_description=readme,
    long_description_content_type='text/markdown',
    version=about['__version__'],
    author=about['__author__'],
    author_email=about['__author_email__'],
    url=about['__url__'],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        'test': test_requirements,
    },
    zip_safe=False,
    entry_points={
        'console_scripts': ['inflector=inflector.cli:cli'],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3.8',
        'Topic :: Text Processing :: Linguistic',
    ],
    keywords='inflection pluralize singularize camelize underscore'
)
