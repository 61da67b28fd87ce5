"""chart_colour.core — Foundation layer.

Contains the types, theme table, byte triplet helpers, the colour resolver,
the chart description loader and the report builder.
This module has NO dependencies on chart_colour.commands or chart_colour.registry.
"""
