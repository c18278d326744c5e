"""
The `storages` package keeps ambient, call-chain-scoped state.

Contents
--------
- transactional_session_storage
    - `transactional_session_context`: the ``ContextVar`` holding the active session
    - `TransactionalSessionStorage` / `session_storage`: get, set and reset
      the active session for the current chain
"""

from txcontext.storages.transactional_session_storage import (
    TransactionalSessionStorage,
    session_storage,
    transactional_session_context,
)

__all__ = ["TransactionalSessionStorage", "session_storage", "transactional_session_context"]
