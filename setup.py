"""
Setup script for disk-stats
"""

from setuptools import setup, find_packages

setup(
    name="disk-stats",
    version="1.0.0",
    description="Linux block device read/write throughput sampling from /proc/diskstats",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
