"""compare_table.core — Foundation layer.

Contains the colour space converter, palette, type definitions, error
taxonomy, matrix validator, loaders and report builder.
This module has NO dependencies on compare_table.modes, compare_table.render
or compare_table.registry. Only stdlib is allowed here.
"""
