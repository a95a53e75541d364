#!/usr/bin/env python
from setuptools import find_packages, setup

setup(
    name="mcstate",
    version="0.1.0",
    description="Block state encoding and placement behaviors for MCPy",
    license="MIT",
    python_requires=">=3.9",
    packages=find_packages(exclude=["tests", "tests.*", "benchmarks", "benchmarks.*"]),
    package_data={"mcstate.data": ["*.toml"]},
    install_requires=[
        "numpy>=1.24.0",
        "tomli>=2.0.0",
        "msgpack>=1.0.5",
        "prometheus_client>=0.16.0",
        "uvloop>=0.17.0; sys_platform != 'win32'",
    ],
    extras_require={
        "test": [
            "pytest>=7.3.1",
        ],
        "bench": [
            "matplotlib>=3.7.0",
            "psutil>=5.9.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "mcstate=mcstate.cli:main",
        ],
    },
)
