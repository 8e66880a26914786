"""Admin login: exchange credentials for a token and open the admin area."""

from job_board.config import LOGIN_FAILED_MESSAGE
from job_board.errors import ApiError
from job_board.routes import ADMIN_PATH, Navigator
from job_board.services.jobs_service import JobsService
from job_board.services.session_guard import SessionGuard
from job_board.utils.logger import get_logger

logger = get_logger(__name__)


class LoginController:
    """No lockout or retry limit; a failed attempt only shows a message."""

    def __init__(self, service: JobsService, guard: SessionGuard, navigator: Navigator) -> None:
        self._service = service
        self._guard = guard
        self._navigator = navigator
        self.error = ""
        self.loading = False

    async def submit(self, username: str, password: str) -> bool:
        self.error = ""
        self.loading = True
        try:
            token = await self._service.login(username, password)
        except ApiError as e:
            logger.info("Login failed for '%s': %s", username, e)
            self.error = e.server_message or LOGIN_FAILED_MESSAGE
            return False
        finally:
            self.loading = False
        self._guard.sign_in(token)
        self._navigator.go(ADMIN_PATH)
        return True
