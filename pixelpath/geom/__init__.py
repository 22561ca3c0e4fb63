"""Geometry helpers for exported documents.

Small and read-only: nothing here feeds back into the editor state.
"""

from __future__ import annotations
