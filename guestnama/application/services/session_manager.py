from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Callable

from guestnama.application.dto.auth import AuthState, LoginInput, SignupInput
from guestnama.application.ports.session_store_port import SessionStorePort
from guestnama.application.ports.storage_port import UserDirectoryPort
from guestnama.application.use_cases.login_local import LoginLocalUseCase
from guestnama.application.use_cases.register_user import RegisterUserUseCase
from guestnama.domain.entities.user import SessionUser
from guestnama.domain.exceptions import SessionStoreError, StorageError


logger = logging.getLogger(__name__)

DEFAULT_REVALIDATION_INTERVAL_SECONDS = 300.0

InvalidationListener = Callable[[], None]


class SessionManager:
    """Holds the single authenticated identity of the running process.

    The session is confirmed by the storage service rather than by an expiry:
    ``initialize`` checks a persisted session once at start-up (failing closed),
    and while authenticated a background task repeats the check every
    ``revalidation_interval_seconds``. A periodic check that reports the user as
    invalid logs out and notifies every invalidation listener so that other
    client-held state is dropped. Transport errors during the periodic check
    are ignored until the next tick.
    """

    def __init__(
        self,
        *,
        login_use_case: LoginLocalUseCase,
        register_user_use_case: RegisterUserUseCase,
        user_directory: UserDirectoryPort,
        session_store: SessionStorePort,
        revalidation_interval_seconds: float = DEFAULT_REVALIDATION_INTERVAL_SECONDS,
    ):
        self._login_use_case = login_use_case
        self._register_user_use_case = register_user_use_case
        self._user_directory = user_directory
        self._session_store = session_store
        self._revalidation_interval_seconds = revalidation_interval_seconds
        self._user: SessionUser | None = None
        self._is_loading = True
        self._revalidation_task: asyncio.Task | None = None
        self._invalidation_listeners: list[InvalidationListener] = []

    @property
    def user(self) -> SessionUser | None:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_revalidation_armed(self) -> bool:
        return self._revalidation_task is not None and not self._revalidation_task.done()

    @property
    def state(self) -> AuthState:
        return AuthState(
            user=self._user,
            is_authenticated=self.is_authenticated,
            is_loading=self._is_loading,
        )

    def add_invalidation_listener(self, listener: InvalidationListener) -> None:
        self._invalidation_listeners.append(listener)

    async def login(self, phone: str, password: str) -> bool:
        user = await self._login_use_case.execute(LoginInput(phone=phone, password=password))
        if user is None:
            logger.info("session_manager: login_rejected")
            return False
        self._establish(user)
        logger.info("session_manager: login user_id=%s role=%s", user.id, user.role)
        return True

    async def signup(self, name: str, phone: str, password: str) -> bool:
        user = await self._register_user_use_case.execute(
            SignupInput(name=name, phone=phone, password=password)
        )
        if user is None:
            logger.info("session_manager: signup_rejected")
            return False
        self._establish(user)
        logger.info("session_manager: signup user_id=%s", user.id)
        return True

    def logout(self) -> None:
        self._disarm_revalidation()
        user_id = self._user.id if self._user is not None else None
        self._user = None
        self._is_loading = False
        self._session_store.clear()
        if user_id is not None:
            logger.info("session_manager: logout user_id=%s", user_id)

    async def initialize(self) -> None:
        try:
            saved = self._session_store.get()
        except SessionStoreError as exc:
            logger.warning("session_manager: persisted_session_unreadable error=%s", exc)
            self.logout()
            return

        if saved is None:
            self._is_loading = False
            return

        try:
            is_valid = await self._user_directory.verify_session(user_id=saved.id)
        except StorageError as exc:
            logger.warning(
                "session_manager: startup_verification_failed user_id=%s error=%s",
                saved.id,
                exc,
            )
            self.logout()
            return

        if not is_valid:
            logger.info("session_manager: persisted_session_rejected user_id=%s", saved.id)
            self.logout()
            return

        self._user = saved
        self._is_loading = False
        self._arm_revalidation()
        logger.info("session_manager: session_restored user_id=%s", saved.id)

    async def revalidate(self) -> bool:
        """Run one periodic check. Returns False once the session is gone."""
        user = self._user
        if user is None:
            return False

        try:
            is_valid = await self._user_directory.verify_session(user_id=user.id)
        except StorageError as exc:
            logger.warning(
                "session_manager: revalidation_skipped user_id=%s error=%s",
                user.id,
                exc,
            )
            return True

        # The session changed while the check was in flight.
        if self._user is not user:
            return self._user is not None

        if is_valid:
            return True

        logger.warning("session_manager: session_invalidated user_id=%s", user.id)
        self.logout()
        self._notify_invalidated()
        return False

    async def close(self) -> None:
        task = self._revalidation_task
        self._revalidation_task = None
        if task is None or task.done():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    def _establish(self, user: SessionUser) -> None:
        self._session_store.set(user)
        self._user = user
        self._is_loading = False
        self._arm_revalidation()

    def _arm_revalidation(self) -> None:
        if self.is_revalidation_armed:
            return
        self._revalidation_task = asyncio.create_task(self._revalidation_loop())

    def _disarm_revalidation(self) -> None:
        task = self._revalidation_task
        self._revalidation_task = None
        if task is None or task.done():
            return
        # The loop disarms itself by returning after a failed check.
        if task is asyncio.current_task():
            return
        task.cancel()

    async def _revalidation_loop(self) -> None:
        while True:
            await asyncio.sleep(self._revalidation_interval_seconds)
            if not await self.revalidate():
                return

    def _notify_invalidated(self) -> None:
        for listener in self._invalidation_listeners:
            listener()
