"""GEO tools — search audit, content reader, schema generator and CMS bridge.

Import concrete tools from their modules, or use
:func:`geomcp.tools.catalog.build_registry` for the full set.
"""
