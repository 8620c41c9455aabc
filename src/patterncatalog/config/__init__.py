"""Configuration package.

Import the manager from patterncatalog.config.manager; this package root stays
import-free so the logging infrastructure can depend on the schemas.
"""
