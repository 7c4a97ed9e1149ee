"""
Setup configuration for the dedup-structures package.
"""

from setuptools import setup, find_packages

setup(
    name='dedup-structures',
    version='1.0.0',
    description='Time-windowed log deduplication cache and Bloom filter membership set',
    author='Dedup Structures Team',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.11',
    install_requires=[
        'numpy>=1.24.0',
        'mmh3>=4.0.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.4.0',
            'pytest-cov>=4.1.0',
            'pylint>=2.17.0',
            'flake8>=6.0.0',
            'black>=23.0.0',
            'mypy>=1.4.0',
        ]
    }
)
