"""
dropfour - Rule engine for a two-player Connect Four game

This package provides the board model and win detection for a fixed 7x6
Connect Four board, a turn-by-turn game orchestrator, and a command-line
interface for playing and inspecting positions.
"""

__version__ = '0.1.0'
