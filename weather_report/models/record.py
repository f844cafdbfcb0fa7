"""Daily weather observation model."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class WeatherCategory(StrEnum):
    COLD = "Cold"
    WARM = "Warm"
    HOT = "Hot"
    MODERATE = "Moderate"


@dataclass(frozen=True)
class WeatherRecord:
    date: date
    temperature: float  # Celsius
    humidity: int  # percent
    precipitation: float  # mm

    @property
    def weather_category(self) -> WeatherCategory:
        """Categorize the day by its temperature truncated toward zero."""
        temp = int(self.temperature)
        if temp < 10:
            return WeatherCategory.COLD
        elif 10 <= temp <= 24:
            return WeatherCategory.WARM
        elif temp > 24:
            return WeatherCategory.HOT
        return WeatherCategory.MODERATE
