"""
GSF combat log parser

Parses Star Wars: The Old Republic CombatLog files into typed events and
splits them into Galactic StarFighter match segments.
"""

__version__ = "0.1.0"
__author__ = "GSF Parser Team"
