from decimal import Decimal, ROUND_HALF_UP

from city_weather.definitions.openweather import KELVIN_OFFSET

_TWO_PLACES = Decimal("0.01")


def kelvin_to_celsius(kelvin: float) -> float:
    """
    Convert a Kelvin reading to Celsius rounded to two decimal places.

    Rounding works on the exact binary value of the difference and breaks
    ties away from zero, like a fixed-point string format would.
    """
    celsius = Decimal(kelvin - KELVIN_OFFSET)
    return float(celsius.quantize(_TWO_PLACES, rounding=ROUND_HALF_UP))
