"""
jsonpoke Utils.

This module provides configuration helpers.
"""
