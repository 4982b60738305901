"""
Pipeline entry points: the programmatic build API and the `devlog` CLI.
"""
