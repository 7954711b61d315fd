"""
Data Ingestion

CONTRACT:
    Input:  bar count, start price, bar interval
    Output: list[Bar]

Only a mock source exists: the demo chart regenerates a static random-walk
series whenever the time period changes. No live feeds.
"""

from klinechart.services.data_ingestion.mock_data import generate_mock_bars

__all__ = ["generate_mock_bars"]
