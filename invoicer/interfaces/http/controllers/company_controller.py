# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from invoicer.application.use_cases.company.get_company import GetCompanyUseCase
from invoicer.application.use_cases.company.update_company import UpdateCompanyUseCase
from invoicer.interfaces.http.auth_gate import auth_required
from invoicer.interfaces.http.dto.company import CompanyDTO, CompanyPatchDTO
from invoicer.shared.errors.validation import raise_validation_error


class CompanyController:
    def __init__(
        self,
        *,
        get_use_case: GetCompanyUseCase,
        update_use_case: UpdateCompanyUseCase,
    ) -> None:
        self._get_use_case = get_use_case
        self._update_use_case = update_use_case

    def get(self) -> tuple[Response, int]:
        company = self._get_use_case.execute()
        return jsonify(CompanyDTO.from_domain(company).to_json()), 200

    def update(self) -> tuple[Response, int]:
        try:
            dto = CompanyPatchDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        company = self._update_use_case.execute(dto.to_changes())
        return jsonify(CompanyDTO.from_domain(company).to_json()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("company", __name__, url_prefix="/api/company")
        bp.add_url_rule("", view_func=auth_required(self.get), methods=["GET"])
        bp.add_url_rule("", view_func=auth_required(self.update), methods=["PUT"])
        return bp
