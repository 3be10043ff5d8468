# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from vehicare.application.services.user_directory import UserDirectory
from vehicare.domain.users.entities import User


class GetCurrentUserUseCase:
    def __init__(self, *, directory: UserDirectory) -> None:
        self._directory = directory

    def execute(self, caller_id: int | None) -> User | None:
        if caller_id is None:
            return None
        return self._directory.find_by_id(caller_id)
