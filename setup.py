"""
Build script for the inkwell package.
"""

# std
import os
import sys
import site

# third-party
from setuptools import Command, find_packages, setup


# ---------------------------------------------------------------------------- #
# allow editable user installs
# see: https://github.com/pypa/pip/issues/7953
site.ENABLE_USER_SITE = ('--user' in sys.argv[1:])


# Setuptools
# ---------------------------------------------------------------------------- #

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        os.system('rm -vrf ./build ./dist ./*.pyc ./*.tgz ./src/*.egg-info')


# Main
# ---------------------------------------------------------------------------- #

setup(
    name='inkwell',
    version='0.1.0',
    description='Fluent, immutable text manipulation with title casing and '
                'multi-language pluralization.',
    python_requires='>=3.8',
    package_dir={'': 'src'},
    packages=find_packages('src', exclude=['tests', 'tests.*']),
    package_data={'inkwell': ['config.yaml']},
    include_package_data=True,
    install_requires=[
        'loguru',
        'regex',
        'unidecode',
        'pyyaml',
        'platformdirs',
    ],
    extras_require={
        'test': ['pytest'],
    },
    cmdclass={'clean': CleanCommand}
)
