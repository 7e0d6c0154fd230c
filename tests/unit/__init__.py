"""
simrng
======

Unit tests of the random sources, samplers, families and the goodness-of-fit
engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
