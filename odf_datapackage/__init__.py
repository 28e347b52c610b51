"""odf-datapackage - name-reference resolution for datapackage documents.

A datapackage describes a dataset plus its analysis and display layout:
- Views (render definitions)
- Resources (data payloads)
- Algorithms (with named inputs pointing at resources)
- Displays (tabs and panes pointing at views)

Every relationship is a string name. This package resolves those names.
"""

__version__ = "0.1.0"
