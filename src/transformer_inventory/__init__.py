"""
Transformer Inventory
=====================

Read-only browsing, filtering and reporting over a pre-exported
transformer / pole dataset for utility field staff.

Architecture:
- records/: Raw row normalization, schema adapters and dataset loading
- classification/: Feeder labels, substation keys and the substation index
- reporting/: Feeder analysis engine (filters, grouping, aggregation, export)
- inventory/: Inventory grid, serial and pole lookups
- ui/: Streamlit feeder analysis page
"""

__version__ = "1.0.0"
