# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from vehicare.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from vehicare.application.use_cases.users.login_user import LoginUserUseCase
from vehicare.application.use_cases.users.register_user import RegisterUserUseCase
from vehicare.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO, user_or_none
from vehicare.interfaces.http.identity import IdentityResolver
from vehicare.shared.config import SecurityConfig
from vehicare.shared.errors.validation import raise_validation_error
from vehicare.shared.middleware.rate_limit import rate_limit


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        register_use_case: RegisterUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
        identity: IdentityResolver,
        security: SecurityConfig,
    ) -> None:
        self._login_use_case = login_use_case
        self._register_use_case = register_use_case
        self._current_user_use_case = current_user_use_case
        self._identity = identity
        self._security = security

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        payload = self._login_use_case.execute(dto.to_input())
        return (
            jsonify(
                {
                    "success": payload.success,
                    "token": payload.token,
                    "user": user_or_none(payload.user),
                    "error": payload.error,
                    "violations": [v.to_dict() for v in payload.violations],
                }
            ),
            200,
        )

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        payload = self._register_use_case.execute(dto.to_input())
        return (
            jsonify(
                {
                    "success": payload.success,
                    "user": user_or_none(payload.user),
                    "error": payload.error,
                    "violations": [v.to_dict() for v in payload.violations],
                }
            ),
            200,
        )

    def me(self) -> tuple[Response, int]:
        user = self._current_user_use_case.execute(self._identity.caller_id())
        return jsonify({"user": user_or_none(user)}), 200

    def as_blueprint(self) -> Blueprint:
        limited = rate_limit(self._security)
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/auth/login", view_func=limited(self.login), methods=["POST"])
        bp.add_url_rule("/auth/register", view_func=limited(self.register), methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
