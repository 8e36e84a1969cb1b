"""
flightscan - Coverage scan pattern generation for uncrewed aircraft survey flights.
"""

__version__ = "0.1.0"
