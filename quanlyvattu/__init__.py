"""Warehouse materials, employees and invoices with text-file storage and table layouts."""

__version__ = "0.1.0"