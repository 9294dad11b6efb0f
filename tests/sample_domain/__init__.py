"""Importable domain modules used as generation input by the tests."""
