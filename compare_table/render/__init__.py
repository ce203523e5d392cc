"""Renderers that paint a MappedMatrix: HTML tables and PNG grids.

The engine only computes colours. Everything that touches markup, escaping
or pixels lives here.
"""
