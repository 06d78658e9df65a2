# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from invoicer.application.use_cases.admin.change_credentials import ChangeCredentialsUseCase
from invoicer.application.use_cases.admin.login_admin import LoginAdminUseCase
from invoicer.interfaces.http.auth_gate import auth_required
from invoicer.interfaces.http.dto.auth import (
    ChangeCredentialsRequestDTO,
    CredentialsUpdatedDTO,
    LoginRequestDTO,
    LoginResponseDTO,
)
from invoicer.shared.errors.validation import raise_validation_error
from invoicer.shared.logging import logger


class AdminController:
    def __init__(
        self,
        *,
        login_use_case: LoginAdminUseCase,
        change_credentials_use_case: ChangeCredentialsUseCase,
    ) -> None:
        self._login_use_case = login_use_case
        self._change_credentials_use_case = change_credentials_use_case

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        session = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"admin.login: ok username={session.username}")
        payload = LoginResponseDTO(token=session.token, username=session.username)
        return jsonify(payload.model_dump()), 200

    def change_credentials(self) -> tuple[Response, int]:
        try:
            dto = ChangeCredentialsRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        session = self._change_credentials_use_case.execute(
            g.user.subject_id,
            dto.old_password,
            new_username=dto.new_username,
            new_password=dto.new_password,
        )

        payload = CredentialsUpdatedDTO(token=session.token, username=session.username)
        return jsonify(payload.model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("admin", __name__, url_prefix="/api/admin")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule(
            "/change-credentials",
            view_func=auth_required(self.change_credentials),
            methods=["POST"],
        )
        return bp
