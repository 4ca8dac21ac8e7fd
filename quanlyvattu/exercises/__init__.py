"""Standalone algorithm exercises, each runnable as a command."""