"""
tests

Test package for the Close.io client.
"""

# Package marker.
