"""HTTP surface for the ledger."""
