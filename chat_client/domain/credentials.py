from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = [
    "CredentialStore",
    "InMemoryCredentialStore",
]


@runtime_checkable
class CredentialStore(Protocol):
    """Holder of the current bearer credential.

    One instance is shared by reference between the services of a process;
    the services only ever read, replace or clear it as a whole.
    """

    def get_credential(self) -> str | None: ...

    def set_credential(self, credential: str) -> None: ...

    def clear_credential(self) -> None: ...


class InMemoryCredentialStore:
    """Process-local credential store.

    Absent until the first successful login/register/refresh. Writes are
    last-writer-wins; there is no locking.
    """

    def __init__(self) -> None:
        self._credential: str | None = None

    def get_credential(self) -> str | None:
        return self._credential

    def set_credential(self, credential: str) -> None:
        """Replace the stored credential.

        Raises:
            ValueError: if the credential is not a non-empty string.
        """
        if not isinstance(credential, str) or not credential:
            raise ValueError("credential must be a non-empty string")
        self._credential = credential

    def clear_credential(self) -> None:
        self._credential = None

    def __repr__(self) -> str:
        state = "present" if self._credential else "absent"
        return f"{type(self).__name__}(credential={state})"
