"""Functional primitives for sliceutils.

This module provides stateless, side-effect-free helpers over ordered
sequences so they can be composed into larger data processing code.
"""
