"""
This module defines constants shared with the OpenWeather providers.
"""

import re

# Offset between the Kelvin and Celsius scales
KELVIN_OFFSET = 273.15

# Message the geocoding provider returns for an empty or unusable query
NOTHING_TO_GEOCODE = "Nothing to geocode"

CITY_NAME_PATTERN = re.compile(r"[A-Za-z]+")
