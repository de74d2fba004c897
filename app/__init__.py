"""Greeting service application package.

Subpackages follow a layered layout: ``domain`` holds entities and errors,
``application`` the use cases, ``infrastructure`` configuration sources and
logging, and ``interfaces`` the HTTP API.
"""
