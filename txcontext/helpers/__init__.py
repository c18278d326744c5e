"""
The `helpers` package provides the decorators that manage transactions
for service methods.

These helpers handle the session lifecycle once, at the outermost call, and
make the session reachable from nested calls without extra parameters.

Contents
--------
- transactionManagement
    `@transactional` wraps an async method in a transaction:
        - Reuses the transaction already active for the call chain
        - Otherwise starts a session, commits on success, aborts on errors
        - Always ends the session it started
        - Runs the method without a transaction if no connection is available
- sessionInjection
    `@add_session_to_last_arguments` binds the active session to the last
    parameter of a function unless the caller passed one explicitly
"""

from txcontext.helpers.sessionInjection import add_session_to_last_arguments
from txcontext.helpers.transactionManagement import transactional

__all__ = ["add_session_to_last_arguments", "transactional"]
