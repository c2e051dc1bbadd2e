"""
CLI (Command Line Interface) for Enter Two Strings.

This is a thin wrapper around the textops explorers. All string handling
lives in the textops package so it can be reused outside the command line.
"""
