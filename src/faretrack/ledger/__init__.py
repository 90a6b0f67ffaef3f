"""Trip ledger.

:class:`~faretrack.ledger.store.TripLedger` owns every trip and is the only
component allowed to open or close one.
"""
