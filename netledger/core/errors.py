from __future__ import annotations


class NetLedgerError(Exception):
    """Base class for failures surfaced by the sampler and the ledger."""


class CollaboratorUnavailable(NetLedgerError):
    """An external collaborator (OS counters, the store) could not be reached."""


class CounterReadError(CollaboratorUnavailable):
    pass


class StoreUnavailableError(CollaboratorUnavailable):
    pass


class PersistenceWriteError(NetLedgerError):
    """The daily upsert failed. Sampler state is untouched, so a later call can retry."""
