#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

PATHDIFF_PATH = HERE / "pathdiff"


def get_version(path):
    """Get the version string from a _version.py file."""
    version_ns = {}
    with open(path) as f:
        exec(f.read(), {}, version_ns)
    return version_ns['__version__']


VERSION = get_version(PATHDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='pathdiff',
      version=VERSION,
      description='Paths, path patterns and path based diffs of json documents',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      author='Jupyter Development Team',
      license='BSD',
      packages=['pathdiff', 'pathdiff.diffing', 'pathdiff.tests'],
      package_data={
          'pathdiff': ['*.schema.json'],
          'pathdiff.tests': ['files/*.json'],
      },
      python_requires='>=3.7',
      install_requires=[
          'colorama',
          'jupyter_core',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=3.6',
          ],
      },
      entry_points={
          'console_scripts': [
              'pathdiff = pathdiff.__main__:main_dispatch',
              'pathdiff-diff = pathdiff.pathdiffapp:main',
              'pathdiff-find = pathdiff.pathfindapp:main',
              'pathdiff-project = pathdiff.pathprojectapp:main',
          ],
      },
      classifiers=[
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
      )
