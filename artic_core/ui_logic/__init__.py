"""
UI logic package - cross-page selection tracking.

Selection set, page reconciliation, selection mutations and the derived
summary. No UI framework dependencies.
"""
from .selection_set import SelectionSet, SelectionEvent, SelectionCallback
from .page_reconciler import reconcile
from .selection_mutator import SelectionMutator, BulkSelectResult, parse_count
from .selection_summary import SelectionSummary, summarize

__all__ = [
    'SelectionSet',
    'SelectionEvent',
    'SelectionCallback',
    'reconcile',
    'SelectionMutator',
    'BulkSelectResult',
    'parse_count',
    'SelectionSummary',
    'summarize'
]
