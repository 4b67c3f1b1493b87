"""
Data layer — uploaded tables and cell coercion.

Modules:
  cells      : Number / Text / Empty tagged union.
  coercion   : is_numeric, to_number, to_comparable.
  dataset    : TabularDataSet (ingest, DataFrame adapter, preview).
"""

from chartdeck.services.data.dataset import TabularDataSet

__all__ = ["TabularDataSet"]
