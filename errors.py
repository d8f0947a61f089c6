"""
spikegrid module: errors.py

Exception hierarchy.

SimError (base)
└── ConfigError - bad grid dimensions, unknown codec method or policy name

Synapse targets outside the network raise the builtin IndexError.
"""

from __future__ import annotations


class SimError(Exception):
    """Base exception for all spikegrid errors."""


class ConfigError(SimError, ValueError):
    """
    Invalid configuration.

    Raised at construction or codec-invocation time; never retryable.
    """
