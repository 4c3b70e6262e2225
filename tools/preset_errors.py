# -*- coding: utf-8 -*-

class PresetError(Exception):
    """Base error for the preset tools."""

class UnparseableInputError(PresetError):
    """Raised when input cannot be treated as a document at all."""

class SelectionError(PresetError):
    """Raised when an operation is invoked with an unusable selection."""
