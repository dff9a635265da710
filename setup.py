#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name='regression_analysis',
    version='0.1.0',
    description='Ordinary least-squares simple linear regression with fit and accuracy reporting',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'numpy>=1.20',
        'pandas>=1.3',
        'matplotlib>=3.5',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'regression-analysis=regression_analysis.cli:main',
        ]
    },
    python_requires='>=3.8',
)
