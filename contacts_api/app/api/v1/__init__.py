"""
Version 1 of the API, mounted under ``/api/v1``.

Breaking changes to the contact contract should go into a new version
subpackage so existing clients keep working.
"""
