"""Shared fixtures for the id3 tests."""

import pytest

# Classic play-tennis data: class, outlook, temperature, humidity, windy
WEATHER_ROWS = [
    ["no", "sunny", "hot", "high", "false"],
    ["no", "sunny", "hot", "high", "true"],
    ["yes", "overcast", "hot", "high", "false"],
    ["yes", "rainy", "mild", "high", "false"],
    ["yes", "rainy", "cool", "normal", "false"],
    ["no", "rainy", "cool", "normal", "true"],
    ["yes", "overcast", "cool", "normal", "true"],
    ["no", "sunny", "mild", "high", "false"],
    ["yes", "sunny", "cool", "normal", "false"],
    ["yes", "rainy", "mild", "normal", "false"],
    ["yes", "sunny", "mild", "normal", "true"],
    ["yes", "overcast", "mild", "high", "true"],
    ["yes", "overcast", "hot", "normal", "false"],
    ["no", "rainy", "mild", "high", "true"],
]

OUTLOOK, TEMPERATURE, HUMIDITY, WINDY = 1, 2, 3, 4


@pytest.fixture
def weather_rows():
    return [list(row) for row in WEATHER_ROWS]


@pytest.fixture
def weather_table(weather_rows):
    from id3 import ObservationTable

    return ObservationTable(weather_rows)
