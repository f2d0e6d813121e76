"""Setup script for the NMEA navigation sentence encoder package."""

from setuptools import setup, find_packages

requires = ["click>=8.0", "pynmea2>=1.19"]

__version__ = None
exec(open("src/nmea_nav/version.py").read())

setup(
    name="nmea-nav",
    version=__version__,
    description="Encodes marine navigation data into NMEA-0183 APB and RMB sentences",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["test"]),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requires,
    extras_require={"test": ["pytest>=7.0"]},
    entry_points={"console_scripts": ["nmea-nav = nmea_nav.cli:main"]},
)
