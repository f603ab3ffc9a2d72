from __future__ import annotations

from guestnama.application.dto.auth import LoginInput
from guestnama.application.ports.password_hasher_port import PasswordHasherPort
from guestnama.application.ports.storage_port import UserDirectoryPort
from guestnama.domain.entities.user import SessionUser, to_session_user
from guestnama.domain.services.phone import normalize_phone


class LoginLocalUseCase:
    def __init__(
        self,
        *,
        user_directory: UserDirectoryPort,
        password_hasher: PasswordHasherPort,
    ):
        self._user_directory = user_directory
        self._password_hasher = password_hasher

    async def execute(self, command: LoginInput) -> SessionUser | None:
        phone = normalize_phone(command.phone)
        password_hash = self._password_hasher.hash(command.password)

        users = await self._user_directory.get_users()
        for user in users:
            if normalize_phone(user.phone) == phone and user.password_hash == password_hash:
                return to_session_user(user)
        return None
