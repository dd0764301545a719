"""Setup script for mtx_layout package."""

from setuptools import setup, find_packages

setup(
    name='mtx_layout',
    version='0.3',
    packages=find_packages(include=['mtx_layout', 'mtx_layout.*']),
    package_data={'mtx_layout.config': ['defaults.yaml']},
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'scipy>=1.9.0',
        'matplotlib>=3.3.0',
        'pyyaml>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'mtx-layout=mtx_layout.cli:main',
        ],
    },
)
