# SPDX-License-Identifier: MIT
"""Utilities for sublimegen."""
