"""
Components: registry, resolver, values, validation, analysis, config.
"""
