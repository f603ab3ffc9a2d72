from __future__ import annotations

import logging

from guestnama.application.dto.auth import SignupInput
from guestnama.application.ports.id_generator_port import IdGeneratorPort
from guestnama.application.ports.password_hasher_port import PasswordHasherPort
from guestnama.application.ports.storage_port import UserDirectoryPort
from guestnama.domain.entities.user import DEFAULT_ROLE, SessionUser, User, to_session_user
from guestnama.domain.services.phone import normalize_phone

from .auth_common import isoformat_utc, utcnow


logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        user_directory: UserDirectoryPort,
        password_hasher: PasswordHasherPort,
        id_generator: IdGeneratorPort,
    ):
        self._user_directory = user_directory
        self._password_hasher = password_hasher
        self._id_generator = id_generator

    async def execute(self, command: SignupInput) -> SessionUser | None:
        phone = normalize_phone(command.phone)
        if not phone:
            return None

        # Uniqueness is checked here, not by the storage service.
        users = await self._user_directory.get_users()
        if any(normalize_phone(user.phone) == phone for user in users):
            logger.info("register_user: phone_already_registered")
            return None

        user = User(
            id=self._id_generator.new_id(),
            name=command.name.strip(),
            phone=phone,
            role=DEFAULT_ROLE,
            password_hash=self._password_hasher.hash(command.password),
            created_at=isoformat_utc(utcnow()),
        )
        await self._user_directory.add_user(user)
        logger.info("register_user: created user_id=%s", user.id)
        return to_session_user(user)
