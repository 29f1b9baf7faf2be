"""Bundled JSON catalogs, one ``<locale>.json`` per locale.

Read through PackageCatalogLoader.
"""
