"""Host adapters: stores, clocks, event sinks and the local ledger."""
