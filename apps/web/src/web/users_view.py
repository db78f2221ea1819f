"""User list screen: loads users and adds a test user."""

import logging

from web.state import UsersState
from web.user_client import UserApiClient, UserApiError

logger = logging.getLogger(__name__)

LOAD_ERROR_PREFIX = "Kunne ikke laste brukere: "
CREATE_ERROR_PREFIX = "Kunne ikke opprette bruker: "

TEST_USER_NAME = "Test Bruker"
TEST_USER_EMAIL = "test@example.com"


class UsersView:
    """Single list-and-add screen driven by an immutable UsersState."""

    def __init__(self, client: UserApiClient) -> None:
        self.client = client
        self.state = UsersState()

    def mount(self) -> UsersState:
        """Load the list when the screen is first shown."""
        return self.load_users()

    def load_users(self) -> UsersState:
        self.state = self.state.start_loading()
        try:
            users = self.client.get_users()
        except UserApiError as e:
            logger.error("Error loading users: %s", e)
            self.state = self.state.failed(LOAD_ERROR_PREFIX + e.message)
        else:
            self.state = self.state.loaded(users)
        return self.state

    def add_test_user(self) -> UsersState:
        """Post the fixed test user and append the server's record without re-fetching."""
        try:
            user = self.client.create_user(TEST_USER_NAME, TEST_USER_EMAIL)
        except UserApiError as e:
            logger.error("Error creating user: %s", e)
            self.state = self.state.add_failed(CREATE_ERROR_PREFIX + e.message)
        else:
            self.state = self.state.user_added(user)
        return self.state

    def render(self) -> str:
        lines = [f"Brukere ({self.client.get_api_url()})", ""]
        if self.state.loading:
            lines.append("Laster brukere...")
        if self.state.error:
            lines.append(self.state.error)
        if self.state.users:
            for user in self.state.users:
                lines.append(f"{user.id:>4}  {user.name}  <{user.email}>  {user.created_at.isoformat()}")
        elif self.state.phase == "success":
            lines.append("Ingen brukere funnet.")
        return "\n".join(lines)
