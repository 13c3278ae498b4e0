"""Shift Pay package.

Feature modules (pay, entries, payroll) sit behind a thin Flask controller
layer. The ``pay`` module is a pure calculator with no I/O.
"""
