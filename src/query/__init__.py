"""Typed record query layer.

This module filters tagged user and admin records by variant and
field constraints. It validates every call before touching records.
"""
