"""In-memory demo login gateway backed by a fixed user directory."""

import logging
from typing import Dict, Iterable, List, Optional

from models.enums import KycStatus
from models.exceptions import AuthenticationError, ModelNotFoundError
from models.users import DemoUserModel, DemoUserPublicModel, LoginResultModel


logger = logging.getLogger(__name__)

DEMO_PASSWORD = "demo123"
TOKEN_PREFIX = "mock-jwt-token-"

_DEMO_USER_ROWS = [
    ("user_001", "Priya Rajesh", "priya@paysafe.com", "+919000000001", "HDFC-1111"),
    ("user_002", "Arjun Kumar", "arjun@paysafe.com", "+919000000002", "ICICI-2222"),
    ("user_003", "Suresh Venkatesh", "suresh@paysafe.com", "+919000000003", "SBI-3333"),
    ("user_004", "Meera Patel", "meera@paysafe.com", "+919000000004", "AXIS-4444"),
    ("user_005", "Rajesh Gupta", "rajesh@paysafe.com", "+919000000005", "KOTAK-5555"),
    ("user_006", "Anita Sharma", "anita@paysafe.com", "+919000000006", "PNB-6666"),
    ("user_007", "Vikram Singh", "vikram@paysafe.com", "+919000000007", "BOI-7777"),
    ("user_008", "Deepika Reddy", "deepika@paysafe.com", "+919000000008", "CANARA-8888"),
    ("user_009", "Rohit Agarwal", "rohit@paysafe.com", "+919000000009", "UNION-9999"),
    ("user_010", "Kavya Nair", "kavya@paysafe.com", "+919000000010", "FEDERAL-0000"),
]


def default_demo_users() -> List[DemoUserModel]:
    """Build the fixed demo directory."""
    return [
        DemoUserModel(
            id=user_id,
            name=name,
            email=email,
            phone=phone,
            bank_mask=bank_mask,
            kyc_status=KycStatus.VERIFIED,
            password=DEMO_PASSWORD,
        )
        for user_id, name, email, phone, bank_mask in _DEMO_USER_ROWS
    ]


def build_token(user_id: str) -> str:
    """Return the constant-prefix demo token for a user."""
    return TOKEN_PREFIX + user_id


class DemoAuthService:
    """Resolve demo credentials against the in-memory directory."""

    def __init__(self, users: Optional[Iterable[DemoUserModel]] = None) -> None:
        directory = list(users) if users is not None else default_demo_users()
        self._users_by_id: Dict[str, DemoUserModel] = {user.id: user for user in directory}
        self._users_by_email: Dict[str, DemoUserModel] = {
            user.email.strip().lower(): user for user in directory
        }

    def find_user_by_email(self, email: str) -> Optional[DemoUserModel]:
        """Return the directory entry for an email, ignoring case and padding."""
        return self._users_by_email.get(str(email or "").strip().lower())

    def login(self, email: str, password: str) -> LoginResultModel:
        """Validate credentials and return the demo token with the public profile.

        Raises:
            AuthenticationError: If the email is unknown or the password differs.
        """
        user = self.find_user_by_email(email)
        if user is None:
            logger.warning("Login rejected for unknown email=%s", email)
            raise AuthenticationError("Invalid credentials")
        if password != user.password:
            logger.warning("Login rejected for user_id=%s: password mismatch", user.id)
            raise AuthenticationError("Invalid credentials")

        logger.info("Login successful user_id=%s", user.id)
        return LoginResultModel(token=build_token(user.id), user=user.to_public())

    def get_user(self, user_id: str) -> DemoUserPublicModel:
        """Return a public user profile by id.

        Raises:
            ModelNotFoundError: If no demo user has this id.
        """
        user = self._users_by_id.get(user_id)
        if user is None:
            raise ModelNotFoundError("User not found: {0}".format(user_id))
        return user.to_public()

    def list_users(self) -> List[DemoUserPublicModel]:
        """Return all demo users without passwords."""
        return [user.to_public() for user in self._users_by_id.values()]
