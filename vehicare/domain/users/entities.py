# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    created_at: datetime
    last_login_at: datetime | None = None
    is_active: bool = True
