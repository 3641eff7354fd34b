#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

from setuptools import setup, find_packages

with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read()

setup(
    name='analemma',
    version='0.1.0',
    description="Analytic solar position and Equation of Time engine",
    long_description=readme + '\n\n' + history,
    long_description_content_type='text/x-rst',
    packages=find_packages(include=['analemma', 'analemma.*']),
    entry_points={
        'console_scripts': [
            'analemma=analemma.cli:main'
        ]
    },
    package_data={'analemma': ['examples/*.yaml']},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'Click>=7.0',
        'numpy',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
    license="MIT license",
    zip_safe=False,
    keywords='analemma equation-of-time solar-position',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Education',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
)
