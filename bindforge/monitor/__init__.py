"""Bindforge presentation layer.

Modules
-------
report
    ``render`` formats a classified interface as plain text;
    ``ReportPrinter`` prints reports and run events with Rich.
"""
