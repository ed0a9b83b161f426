# =============================================================================
# ADMIN SESSION STORE
# =============================================================================
from dataclasses import dataclass, asdict

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class SessionUser:
    """Identity kept in the session after a successful login."""
    id: str
    username: str
    role: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""

    is_authenticated = True

    @property
    def pk(self):
        return self.id

    @property
    def is_admin(self):
        return self.role == ADMIN_ROLE

    def to_dict(self):
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }

    @classmethod
    def from_session(cls, data):
        try:
            return cls(**data)
        except TypeError:
            return None


class AdminSessionManager:
    """Reads and writes the logged-in identity on a Django session."""

    SESSION_KEY = "safari_user"

    def __init__(self, session):
        self.session = session

    def get_user(self):
        data = self.session.get(self.SESSION_KEY)
        if not isinstance(data, dict):
            return None
        return SessionUser.from_session(data)

    def set_user(self, user):
        """Store ``user`` under a fresh session key."""
        self.session.cycle_key()
        self.session[self.SESSION_KEY] = asdict(user)
        self.session.modified = True

    def destroy(self):
        self.session.flush()
