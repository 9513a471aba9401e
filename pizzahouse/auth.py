"""Admin session capability passed explicitly to protected operations."""

import json
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthContext:
    """Logged-in state of the admin dashboard.

    Built once from whatever the session layer stored and handed to the
    services that need it, instead of being read from ambient storage.
    """

    email: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.email)

    @classmethod
    def anonymous(cls) -> "AuthContext":
        return cls()

    @classmethod
    def from_stored_user(cls, raw: Optional[str]) -> "AuthContext":
        """Parse the stored admin-user JSON payload.

        A payload is valid when it is a JSON object with a non-empty
        ``email``; anything else yields an anonymous context.
        """
        if not raw:
            return cls.anonymous()
        try:
            user = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored admin user is not valid JSON")
            return cls.anonymous()
        if not isinstance(user, dict) or not user.get("email"):
            return cls.anonymous()
        return cls(email=str(user["email"]))
