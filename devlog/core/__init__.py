"""
Core infrastructure for devlog: paths, configuration, logging, exceptions
and CLI statistics.
"""
