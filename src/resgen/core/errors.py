#!/usr/bin/env python3
"""
Purpose:
    Exception types raised by resgen.
"""


class ConfigurationError(ValueError):
    """
    A resource definition is malformed.

    Raised for validation failures, unknown versions, missing resource
    references and unsupported literal values. Generation must stop; no
    partial output is produced for the offending resource.
    """
