"""Authentication flag and active role, passed explicitly to whoever needs it."""

import logging
from dataclasses import dataclass
from typing import Literal

from bank_portal.store.local_storage import LocalStorage

logger = logging.getLogger(__name__)

UserRole = Literal["client", "employee"]
ROLES: tuple[str, ...] = ("client", "employee")

AUTH_KEY = "isAuthenticated"
ROLE_KEY = "userRole"


@dataclass
class SessionState:
    """
    Demo session: whether the user is signed in and which view is active.
    State changes do not persist by themselves; call save() after changing it.
    """

    is_authenticated: bool = False
    role: UserRole = "client"

    @classmethod
    def load(cls, storage: LocalStorage) -> "SessionState":
        """Restore from storage at startup. Unknown role values fall back to client."""
        state = cls()
        if storage.get_item(AUTH_KEY) == "true":
            state.is_authenticated = True
        saved_role = storage.get_item(ROLE_KEY)
        if saved_role in ROLES:
            state.role = saved_role
        elif saved_role is not None:
            logger.warning("Ignoring unknown stored role %r", saved_role)
        return state

    def save(self, storage: LocalStorage) -> None:
        if self.is_authenticated:
            storage.set_item(AUTH_KEY, "true")
        else:
            storage.remove_item(AUTH_KEY)
        if self.is_authenticated or self.role != "client":
            storage.set_item(ROLE_KEY, self.role)
        else:
            storage.remove_item(ROLE_KEY)

    def login(self) -> None:
        self.is_authenticated = True

    def logout(self) -> None:
        """Sign out and reset to the client view."""
        self.is_authenticated = False
        self.role = "client"

    def switch_role(self, role: str) -> None:
        if role not in ROLES:
            raise ValueError(f"role must be one of {list(ROLES)}, got {role!r}")
        self.role = role
