#!/usr/bin/env python3
"""
Setup script for the Porchfest Geo package.
"""

import re

from setuptools import setup, find_packages

# Read version metadata without importing the package (it needs its dependencies)
with open("porchfest_geo/__init__.py") as f:
    version = dict(re.findall(r'^(__version__|__author__) = "([^"]+)"', f.read(), re.M))

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="porchfest-geo",
    version=version["__version__"],
    author=version["__author__"],
    description="Geocode porchfest listings into CSV and GeoJSON and scrape artist pages",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["porchfest_geo", "porchfest_geo.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    entry_points={
        "console_scripts": [
            "porchfest-geo=porchfest_geo.cli.main:main",
            "porchfest-batch=porchfest_geo.cli.main:batch_main",
            "porchfest-scrape=porchfest_geo.cli.main:scrape_main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: GIS",
        "Topic :: Text Processing :: Markup :: HTML",
    ],
    keywords="porchfest geocoding nominatim geojson csv scraping",
)
